"""Commands proxying simple JSON APIs down to one text field."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Tuple

import httpx
from telegram import Update
from telegram.error import TelegramError
from telegram.ext import CommandHandler, ContextTypes

from ..config import settings

logger = logging.getLogger(__name__)

DAD_JOKE_URL = "https://icanhazdadjoke.com/"


class ApiError(Exception):
    """A third-party API could not be reached or answered unexpectedly."""


@dataclass(frozen=True)
class SimpleApi:
    url: str
    field: str
    outer_field: Optional[str] = None


SIMPLE_APIS = {
    ("cn", "chucknorris"): SimpleApi("http://api.icndb.com/jokes/random?escape=javascript", "joke", "value"),
    ("trump",): SimpleApi("https://api.whatdoestrumpthink.com/api/v1/quotes/random", "message"),
    ("catfact",): SimpleApi("https://cat-fact.herokuapp.com/facts/random", "text"),
    ("funfact",): SimpleApi("https://uselessfacts.jsph.pl/random.json?language=en", "text"),
}


async def get_json(client: httpx.AsyncClient, url: str, **kwargs) -> Tuple[httpx.Response, Any]:
    """GET ``url`` and return the response with its decoded JSON body."""
    try:
        resp = await client.get(url, **kwargs)
        return resp, resp.json()
    except httpx.HTTPError as e:
        raise ApiError(f"error during API request: {e}") from e
    except ValueError as e:
        raise ApiError(f"invalid JSON from {url}: {e}") from e


async def fetch_json(client: httpx.AsyncClient, url: str, **kwargs) -> Any:
    _, data = await get_json(client, url, **kwargs)
    return data


async def fetch_json_extract_field(
    client: httpx.AsyncClient,
    url: str,
    field: str,
    outer_field: Optional[str] = None,
) -> str:
    data = await fetch_json(client, url)
    if outer_field is not None:
        if not isinstance(data, dict) or outer_field not in data:
            raise ApiError(f"outer_field not found: {outer_field!r} (json: {data!r})")
        data = data[outer_field]
    if not isinstance(data, dict) or field not in data:
        raise ApiError(f"json_field not found: {field!r} (json: {data!r})")
    value = data[field]
    if not isinstance(value, str):
        raise ApiError(f"type error: expected string, found value: {value!r}")
    return value


async def fetch_dad_joke(client: httpx.AsyncClient) -> str:
    data = await fetch_json(
        client,
        DAD_JOKE_URL,
        headers={"Accept": "application/json", "User-Agent": settings.USER_AGENT},
    )
    joke = data.get("joke") if isinstance(data, dict) else None
    if joke is None:
        raise ApiError(f"joke field missing: {data!r}")
    if not isinstance(joke, str):
        raise ApiError("joke field not a string")
    return joke


async def _send_result(update: Update, context: ContextTypes.DEFAULT_TYPE, coro) -> None:
    try:
        msg = await coro
    except ApiError as e:
        logger.error("Error during API request: %s", e)
        msg = str(e)
    try:
        await context.bot.send_message(chat_id=update.effective_chat.id, text=msg)
    except TelegramError as e:
        logger.error("Error sending message: %s", e)


def make_simple_api_command(client: httpx.AsyncClient, api: SimpleApi):
    async def simple_api_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        await _send_result(
            update, context, fetch_json_extract_field(client, api.url, api.field, api.outer_field)
        )

    return simple_api_command


def get_api_handlers(client: httpx.AsyncClient):
    """Return handlers for the JSON API commands."""

    async def dadjoke_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        await _send_result(update, context, fetch_dad_joke(client))

    handlers = [
        CommandHandler(list(commands), make_simple_api_command(client, api))
        for commands, api in SIMPLE_APIS.items()
    ]
    handlers.append(CommandHandler("dadjoke", dadjoke_command))
    return handlers
