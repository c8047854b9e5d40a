"""Small helpers shared by the command handlers."""
from __future__ import annotations

from telegram import Update

DEFAULT_SENDER = "Deine Mudda"


def command_text(update: Update) -> str:
    """Everything after the command itself, with newlines preserved."""
    text = update.message.text if update.message else None
    parts = (text or "").split(None, 1)
    return parts[1].strip() if len(parts) > 1 else ""


def sender_name(update: Update) -> str:
    user = update.effective_user
    return user.first_name if user and user.first_name else DEFAULT_SENDER


def reply_target_id(update: Update) -> int:
    """Reply to the message the command answered, or to the command itself."""
    message = update.message
    if message.reply_to_message is not None:
        return message.reply_to_message.message_id
    return message.message_id
