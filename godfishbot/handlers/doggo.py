"""/doggo and /breeds backed by https://dog.ceo."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Union

import httpx
from telegram import Update
from telegram.error import TelegramError
from telegram.ext import CommandHandler, ContextTypes

from ..cache import RemoteUrl
from ..media import MediaError, MediaKind, MediaSender
from .api import ApiError, fetch_json, get_json
from .utils import command_text

logger = logging.getLogger(__name__)

BREEDS_URL = "https://dog.ceo/api/breeds/list/all"
RANDOM_URL = "https://dog.ceo/api/breeds/image/random"
BREED_URL = "https://dog.ceo/api/breed/{}/images/random"


@dataclass
class Doggo:
    url: str


@dataclass
class DoggoError:
    msg: str


QueryResult = Union[Doggo, DoggoError]


@dataclass
class DoggoState:
    client: httpx.AsyncClient
    breeds: List[str] = field(default_factory=list)

    async def load_breeds(self) -> None:
        try:
            self.breeds = await fetch_breeds(self.client)
        except ApiError as e:
            logger.error("Error loading doggo breeds: %s", e)
            logger.error("Using empty breed list")
            self.breeds = []


async def fetch_breeds(client: httpx.AsyncClient) -> List[str]:
    """All breeds, sub-breeds flattened as ``"<sub> <breed>"``, sorted."""
    data = await fetch_json(client, BREEDS_URL)
    if not isinstance(data, dict) or data.get("status") != "success":
        message = data.get("message") if isinstance(data, dict) else None
        if isinstance(message, str):
            raise ApiError(f"Error fetching breed list: {message!r}")
        raise ApiError(f"Unknown error fetching breed list: {data!r}")
    message = data.get("message")
    if not isinstance(message, dict):
        raise ApiError(f"Unexpected breed list: {message!r}")
    breeds = set()
    for breed, sub_breeds in message.items():
        if sub_breeds:
            breeds.update(f"{sub} {breed}" for sub in sub_breeds)
        else:
            breeds.add(breed)
    return sorted(breeds)


def breed_path(breed: str) -> str:
    """``"golden retriever"`` -> ``"retriever/golden"``"""
    return "/".join(reversed(breed.split(" "))).lower()


def suggest_breeds(breeds: List[str], query: str) -> str:
    query = query.lower()
    matches = [b for b in breeds if query in b]
    if not matches:
        return "Breed not found!"
    return "Did you mean any of these:\n" + "\n".join(matches)


async def query_api(
    client: httpx.AsyncClient,
    breeds: List[str],
    breed: Optional[str] = None,
) -> QueryResult:
    url = BREED_URL.format(breed_path(breed)) if breed else RANDOM_URL
    resp, data = await get_json(client, url)
    if not isinstance(data, dict) or not isinstance(data.get("message"), str):
        raise ApiError(f"unexpected doggo response: {data!r}")

    if data.get("status") == "success":
        return Doggo(data["message"])
    logger.error("Got non-success response from doggo API: %r (HTTP %s)", data, resp.status_code)
    if breed and resp.status_code == httpx.codes.NOT_FOUND:
        return DoggoError(suggest_breeds(breeds, breed))
    return DoggoError(data["message"])


def get_doggo_handlers(state: DoggoState, sender: MediaSender):
    """Return handlers for /doggo and /breeds."""

    async def doggo_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        """Usage: /doggo [breed]"""
        if update.message is None:
            return
        try:
            result = await query_api(state.client, state.breeds, command_text(update) or None)
        except ApiError as e:
            logger.error("Error fetching doggo: %s", e)
            return

        if isinstance(result, DoggoError):
            try:
                await update.message.reply_text(result.msg)
            except TelegramError as e:
                logger.error("Error sending message: %s", e)
            return

        async def send(photo):
            return await context.bot.send_photo(update.effective_chat.id, photo)

        try:
            await sender.send(RemoteUrl(result.url), MediaKind.PHOTO, send)
        except MediaError as e:
            logger.error("Error sending doggo: %s", e)

    async def breeds_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        if update.message is None:
            return
        text = "Available doggo breeds:\n\n" + "\n".join(state.breeds)
        try:
            await update.message.reply_text(text)
        except TelegramError as e:
            logger.error("Error sending message: %s", e)

    return [
        CommandHandler("doggo", doggo_command),
        CommandHandler("breeds", breeds_command),
    ]
