"""
Shared fakes for the handler tests.

Telegram objects are stood in for by SimpleNamespace instances carrying only
the attributes the bot reads.
"""

from types import SimpleNamespace

import pytest

from godfishbot.cache import MediaIdCache
from godfishbot.media import MediaSender

MEDIA_FIELDS = ("voice", "audio", "animation", "video", "document")


def make_sent_message(kind=None, file_id=None):
    """A message as returned by a send_* call, carrying one attachment."""
    fields = {name: None for name in MEDIA_FIELDS}
    fields["photo"] = ()
    if kind == "photo":
        fields["photo"] = (
            SimpleNamespace(file_id=f"thumb-{file_id}"),
            SimpleNamespace(file_id=file_id),
        )
    elif kind is not None:
        fields[kind] = SimpleNamespace(file_id=file_id)
    return SimpleNamespace(**fields)


class FakeMessage:
    def __init__(self, text, message_id=10, reply_to_message=None):
        self.text = text
        self.message_id = message_id
        self.reply_to_message = reply_to_message
        self.replies = []

    async def reply_text(self, text, **kwargs):
        self.replies.append(text)
        return SimpleNamespace(text=text)


class FakeBot:
    """
    Records every send. ``respond`` maps the send method ("photo", "voice",
    "animation") to the sent message; by default the message carries an
    attachment of the same kind with file id ``"<kind>-<n>"``.
    """

    def __init__(self, respond=None):
        self.respond = respond or (lambda kind, n: make_sent_message(kind, f"{kind}-{n}"))
        self.sent = []
        self.messages = []

    async def _send(self, kind, chat_id, media, **kwargs):
        self.sent.append((kind, chat_id, media, kwargs))
        return self.respond(kind, len(self.sent))

    async def send_photo(self, chat_id, photo, **kwargs):
        return await self._send("photo", chat_id, photo, **kwargs)

    async def send_voice(self, chat_id, voice, **kwargs):
        return await self._send("voice", chat_id, voice, **kwargs)

    async def send_animation(self, chat_id, animation, **kwargs):
        return await self._send("animation", chat_id, animation, **kwargs)

    async def send_message(self, chat_id, text, **kwargs):
        self.messages.append(text)
        return SimpleNamespace(text=text)


def make_update(text, first_name="Anna", reply_to_message=None):
    return SimpleNamespace(
        message=FakeMessage(text, reply_to_message=reply_to_message),
        effective_chat=SimpleNamespace(id=42),
        effective_user=SimpleNamespace(first_name=first_name) if first_name else None,
    )


def make_context(bot=None):
    return SimpleNamespace(bot=bot or FakeBot())


@pytest.fixture
def cache():
    return MediaIdCache()


@pytest.fixture
def sender(cache):
    return MediaSender(cache)
