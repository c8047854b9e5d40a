"""Image, random image and sound commands backed by bundled files."""
from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import List, Sequence

from telegram import ReplyParameters, Update
from telegram.ext import CommandHandler, ContextTypes

from ..cache import LocalPath
from ..media import MediaError, MediaKind, MediaSender
from ..registry import CommandRegistry
from .utils import reply_target_id

logger = logging.getLogger(__name__)


def make_image_command(path: Path, sender: MediaSender):
    key = LocalPath.for_file(path)

    async def image_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        if update.message is None:
            return
        reply_to = ReplyParameters(message_id=reply_target_id(update))

        async def send(photo):
            return await context.bot.send_photo(
                update.effective_chat.id, photo, reply_parameters=reply_to
            )

        try:
            await sender.send(key, MediaKind.PHOTO, send)
        except MediaError as e:
            logger.error("Error sending image %s: %s", path, e)

    return image_command


def make_random_file_command(paths: Sequence[Path], kind: MediaKind, sender: MediaSender):
    """Command sending one of ``paths`` at random as a photo or voice message."""

    async def random_file_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        path = random.choice(paths)
        chat_id = update.effective_chat.id

        async def send(media):
            if kind is MediaKind.VOICE:
                return await context.bot.send_voice(chat_id, media)
            return await context.bot.send_photo(chat_id, media)

        try:
            await sender.send(LocalPath.for_file(path), kind, send)
        except MediaError as e:
            logger.error("Error sending %s %s: %s", kind.value, path, e)

    return random_file_command


def list_folder(folder: Path) -> List[Path]:
    try:
        return sorted(p for p in folder.iterdir() if p.is_file() and not p.name.startswith("."))
    except OSError as e:
        logger.error("Error listing %s: %s", folder, e)
        return []


def get_media_handlers(registry: CommandRegistry, sender: MediaSender, res_dir: str):
    """Return handlers for image, random image and sound commands."""
    handlers = []
    res = Path(res_dir)

    logger.info("Registering simple image commands...")
    for cmd, img in sorted(registry.images.items()):
        handlers.append(CommandHandler(cmd, make_image_command(res / "images" / img, sender)))

    logger.info("Registering random image commands...")
    for cmd, img_cmd in sorted(registry.img_cmds.items()):
        folder = res / img_cmd.folder
        paths = list_folder(folder)
        if not paths:
            logger.error("Ignoring random image command /%s: no images found in %s", cmd, folder)
            continue
        handlers.append(CommandHandler(cmd, make_random_file_command(paths, MediaKind.PHOTO, sender)))

    logger.info("Registering sound commands...")
    for cmd, sound in sorted(registry.sounds.items()):
        if not sound.files:
            logger.error("Skipping sound command /%s: no files specified", cmd)
            continue
        paths = [res / "sound" / f for f in sound.files]
        handlers.append(CommandHandler(cmd, make_random_file_command(paths, MediaKind.VOICE, sender)))

    return handlers
