"""Upload-or-reuse logic shared by every media-sending command."""
from __future__ import annotations

import asyncio
import enum
import logging
from pathlib import Path
from typing import Any, Awaitable, Callable, Optional, Tuple, Union

from telegram.error import TelegramError

from .cache import LocalPath, MediaIdCache, MediaKey, RemoteUrl

logger = logging.getLogger(__name__)

# What gets handed to a send primitive: a cached file_id, a URL or raw bytes.
MediaSource = Union[str, bytes]
SendFunc = Callable[[MediaSource], Awaitable[Any]]


class MediaKind(str, enum.Enum):
    PHOTO = "photo"
    VOICE = "voice"
    AUDIO = "audio"
    ANIMATION = "animation"
    VIDEO = "video"
    DOCUMENT = "document"


class MediaError(Exception):
    """Base class for failures while sending media."""


class FetchFailed(MediaError):
    """The media bytes could not be read."""


class UploadFailed(MediaError):
    """Telegram rejected the send or could not be reached."""


def _file_id_of(message: Any, kind: MediaKind) -> Optional[str]:
    attachment = getattr(message, kind.value, None)
    if kind is MediaKind.PHOTO:
        # PhotoSize list, smallest first
        attachment = attachment[-1] if attachment else None
    if attachment is None:
        return None
    return getattr(attachment, "file_id", None) or None


def extract_handle(message: Any, expected: MediaKind) -> Optional[Tuple[MediaKind, str]]:
    """Return ``(kind, file_id)`` from a sent message.

    The expected kind is checked first. Telegram sometimes answers with a
    different one (an animation with sound comes back as a video), so any
    other attachment that carries a file_id is accepted too.
    """
    if message is None:
        return None
    file_id = _file_id_of(message, expected)
    if file_id:
        return expected, file_id
    for kind in MediaKind:
        if kind is expected:
            continue
        file_id = _file_id_of(message, kind)
        if file_id:
            return kind, file_id
    return None


class MediaSender:
    """Sends media through the shared file_id cache."""

    def __init__(self, cache: MediaIdCache) -> None:
        self.cache = cache

    async def _load(self, key: MediaKey) -> MediaSource:
        if isinstance(key, LocalPath):
            try:
                return await asyncio.to_thread(Path(key.value).read_bytes)
            except OSError as e:
                raise FetchFailed(f"error loading file {key.value}: {e}") from e
        if isinstance(key, RemoteUrl):
            return key.value
        raise ValueError(f"no upload source given for {key!r}")

    async def send(
        self,
        key: MediaKey,
        kind: MediaKind,
        send: SendFunc,
        source: Optional[MediaSource] = None,
    ) -> Any:
        """
        Send the media identified by ``key``.

        Args:
            key: Cache key for the media.
            kind: Media kind the send primitive produces.
            send: Coroutine function taking a file_id, URL or bytes and
                returning the sent message.
            source: Upload source on a cache miss. Required for ExternalId
                keys; local paths are read from disk and URLs passed through.

        Returns:
            The message returned by ``send``.

        Raises:
            FetchFailed: The local file could not be read.
            UploadFailed: Telegram returned an error.
        """
        file_id = self.cache.lookup(key)
        if file_id is not None:
            logger.debug("Cache hit for %r", key)
            try:
                return await send(file_id)
            except TelegramError as e:
                raise UploadFailed(f"error sending cached {kind.value}: {e}") from e

        if source is None:
            source = await self._load(key)
        try:
            message = await send(source)
        except TelegramError as e:
            raise UploadFailed(f"error sending {kind.value}: {e}") from e

        found = extract_handle(message, kind)
        if found is None:
            logger.warning("Unexpected response kind for %s %r: no file id", kind.value, key)
            return message
        actual, file_id = found
        if actual is not kind:
            logger.info("Requested %s for %r, Telegram returned %s", kind.value, key, actual.value)
        self.cache.store(key, file_id)
        logger.debug("Cached file id for %r (%d entries)", key, len(self.cache))
        return message
