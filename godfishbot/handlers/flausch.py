"""/flausch: a random bunny loop from https://bunnies.io."""
from __future__ import annotations

import logging
from typing import Tuple

import httpx
from telegram import Update
from telegram.error import TelegramError
from telegram.ext import CommandHandler, ContextTypes

from ..cache import ExternalId
from ..media import MediaError, MediaKind, MediaSender
from .api import ApiError, fetch_json

logger = logging.getLogger(__name__)

URL = "https://api.bunnies.io/v2/loop/random/?media=mp4"


async def fetch_bunny(client: httpx.AsyncClient) -> Tuple[str, str]:
    """Return ``(id, mp4_url)`` of a random bunny."""
    data = await fetch_json(client, URL)
    try:
        bunny_id, mp4 = data["id"], data["media"]["mp4"]
    except (KeyError, TypeError) as e:
        raise ApiError(f"unexpected bunny response: {data!r}") from e
    if not isinstance(mp4, str) or not mp4:
        raise ApiError(f"unexpected bunny response: {data!r}")
    return str(bunny_id), mp4


async def attempt_flausch(
    client: httpx.AsyncClient,
    sender: MediaSender,
    update: Update,
    context: ContextTypes.DEFAULT_TYPE,
) -> None:
    bunny_id, mp4 = await fetch_bunny(client)

    async def send(animation):
        return await context.bot.send_animation(update.effective_chat.id, animation)

    # The id is stable, the mp4 URL is only used for the first upload.
    await sender.send(ExternalId(bunny_id), MediaKind.ANIMATION, send, source=mp4)


def get_flausch_handlers(client: httpx.AsyncClient, sender: MediaSender):
    """Return the /flausch handler."""

    async def flausch_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        if update.message is None:
            return
        try:
            await attempt_flausch(client, sender, update, context)
        except (ApiError, MediaError) as e:
            logger.error("Error attempting flausch: %s", e)
            try:
                await update.message.reply_text(f"Error attempting flausch: {e}")
            except TelegramError as err:
                logger.error("Error sending message: %s", err)

    return [CommandHandler("flausch", flausch_command)]
