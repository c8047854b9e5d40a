"""In-memory cache for Telegram file_id re-use.

Every media command asks the cache for a file_id before uploading anything.
Entries live for the whole process: there is no TTL and nothing is evicted.
"""
from __future__ import annotations

import math
import os
import threading
from dataclasses import dataclass
from typing import Optional, Union

from cachetools import Cache


@dataclass(frozen=True)
class LocalPath:
    """A bundled asset on disk."""

    value: str

    @classmethod
    def for_file(cls, path: Union[str, os.PathLike]) -> "LocalPath":
        return cls(os.path.normpath(os.fspath(path)))


@dataclass(frozen=True)
class RemoteUrl:
    """A remote image or animation passed to Telegram by URL."""

    value: str


@dataclass(frozen=True)
class ExternalId:
    """A stable id handed out by a third-party API (the URL may change)."""

    value: str


MediaKey = Union[LocalPath, RemoteUrl, ExternalId]


class MediaIdCache:
    """Maps a media key to the file_id Telegram assigned on first upload.

    lookup() and store() are each a single short critical section. Callers
    must not hold anything across the upload in between, so two concurrent
    misses for the same key may both upload; the later store() wins.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._ids: Cache[MediaKey, str] = Cache(maxsize=math.inf)

    def lookup(self, key: MediaKey) -> Optional[str]:
        with self._lock:
            return self._ids.get(key)

    def store(self, key: MediaKey, file_id: str) -> None:
        with self._lock:
            self._ids[key] = file_id

    def __len__(self) -> int:
        with self._lock:
            return len(self._ids)
