"""/help command generated from the command table."""
from __future__ import annotations

import logging

from telegram import LinkPreviewOptions, Update
from telegram.error import TelegramError
from telegram.ext import CommandHandler, ContextTypes

from ..registry import CommandRegistry, command_help
from .utils import command_text

logger = logging.getLogger(__name__)


def get_help_handlers(registry: CommandRegistry):
    """Return all handlers for the help command."""
    logger.info("Generating help message...")
    help_msg, cmd_helps = registry.build_help()

    async def help_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        """Usage: /help [command]"""
        if update.message is None:
            return
        cmd = command_text(update)
        text = command_help(cmd_helps, cmd) if cmd else help_msg
        try:
            await update.message.reply_text(
                text, link_preview_options=LinkPreviewOptions(is_disabled=True)
            )
        except TelegramError as e:
            logger.error("Error sending help message: %s", e)

    return [CommandHandler("help", help_command)]
