"""/testlove: name compatibility, totally scientifically correct."""
from __future__ import annotations

import logging
from collections import Counter
from itertools import combinations
from typing import List, Sequence

from telegram import Update
from telegram.error import TelegramError
from telegram.ext import CommandHandler, ContextTypes

from .utils import command_text

logger = logging.getLogger(__name__)

USAGE = "/testlove <list of names>"
LOVE_VAL = "ILOVE"


def _ascii_upper(text: str) -> str:
    return "".join(c.upper() if c.isascii() else c for c in text)


def get_count(name1: str, name2: str) -> List[int]:
    """Letter counts of both names plus ILOVE, ordered by letter."""
    counts = Counter(_ascii_upper(name1) + _ascii_upper(name2) + LOVE_VAL)
    return [counts[ch] for ch in sorted(counts)]


def love_score(name1: str, name2: str) -> str:
    if name1 < name2:
        name1, name2 = name2, name1
    count = get_count(name1, name2)
    if len(count) == 1:
        return str(count[0])
    while len(count) != 2:
        half = len(count) // 2
        sub: List[int] = []
        for i in range(half):
            sub.extend(int(d) for d in str(count[i] + count[-1 - i]))
        if len(count) % 2:
            sub.append(count[half])
        count = sub
    return f"{count[0]}{count[1]}"


def rank_love(names: Sequence[str]) -> str:
    results = {}
    for name1, name2 in combinations(names, 2):
        if name1 == name2 or (name1, name2) in results or (name2, name1) in results:
            continue
        results[(name1, name2)] = love_score(name1, name2)
    ranked = sorted(results.items(), key=lambda item: int(item[1]), reverse=True)
    return "\n".join(
        f"{i}. {name1} x {name2} ({result}%)"
        for i, ((name1, name2), result) in enumerate(ranked, start=1)
    )


def split_names(text: str) -> List[str]:
    return text.split("\n") if "\n" in text else text.split(" ")


async def love_test_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Usage: /testlove <list of names>"""
    if update.message is None:
        return
    text = command_text(update)
    names = split_names(text) if text else []
    try:
        if not text:
            await update.message.reply_text(USAGE)
        elif len(names) < 2:
            await update.message.reply_text("Please provide at least two names.")
        else:
            if len(names) > 2:
                result = rank_love(names)
            else:
                result = f"{names[0]} and {names[1]} fit {love_score(names[0], names[1])}%."
            await context.bot.send_message(chat_id=update.effective_chat.id, text=result)
    except TelegramError as e:
        logger.error("Error sending message: %s", e)


def get_love_test_handlers():
    """Return the /testlove handler."""
    return [CommandHandler("testlove", love_test_command)]
