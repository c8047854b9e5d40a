"""Random text commands (/hug, /kiss, /explode ...)."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from telegram import Update
from telegram.error import TelegramError
from telegram.ext import CommandHandler, ContextTypes

from ..registry import CommandRegistry, RandTextDef
from ..texts import load_file_lines, random_sentence, random_sentence_at
from .utils import command_text, sender_name

logger = logging.getLogger(__name__)


def make_text_command(usage: str, options: List[str], options_single: Optional[List[str]]):
    async def text_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        if update.message is None:
            return
        target = command_text(update)
        sender = sender_name(update)
        if target:
            result = random_sentence_at(options, sender, target)
        elif options_single is not None:
            result = random_sentence(options, options_single, sender)
        else:
            result = usage
        try:
            await context.bot.send_message(chat_id=update.effective_chat.id, text=result)
        except TelegramError as e:
            logger.error("Error sending message: %s", e)

    return text_command


def _load(cmd: str, txt: RandTextDef, base: Path) -> CommandHandler:
    options = load_file_lines(base / txt.file)
    options_single = load_file_lines(base / txt.single_file) if txt.single_file else None
    usage = txt.info.usage or cmd
    return CommandHandler(cmd, make_text_command(usage, options, options_single))


def get_text_handlers(registry: CommandRegistry, res_dir: str):
    """Return handlers for every random text command.

    The text files are read once here; a missing file stops startup.
    """
    logger.info("Registering random text commands...")
    base = Path(res_dir) / "txt"
    return [_load(cmd, txt, base) for cmd, txt in sorted(registry.txt_cmds.items())]
