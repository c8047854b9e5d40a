"""Entry point for the Telegram bot."""
from __future__ import annotations

import logging
import sys

import httpx
from telegram import Update
from telegram.ext import Application, ApplicationBuilder, ContextTypes

from .cache import MediaIdCache
from .commands import build_registry
from .config import settings
from .media import MediaSender

from .handlers.api import get_api_handlers
from .handlers.doggo import DoggoState, get_doggo_handlers
from .handlers.flausch import get_flausch_handlers
from .handlers.help import get_help_handlers
from .handlers.love_test import get_love_test_handlers
from .handlers.media import get_media_handlers
from .handlers.text import get_text_handlers

# --- Logging Setup ---
logger = logging.getLogger(__name__)
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    stream=sys.stdout,
)
logging.getLogger("httpx").setLevel(logging.WARNING)


async def error_handler(update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
    logger.error("Unhandled error while processing %s", update, exc_info=context.error)


def build_application(token: str) -> Application:
    """Wire the command handlers around one media cache and one HTTP client."""
    client = httpx.AsyncClient(timeout=settings.HTTP_TIMEOUT, follow_redirects=True)
    sender = MediaSender(MediaIdCache())
    doggo = DoggoState(client)

    async def post_init(application: Application) -> None:
        await doggo.load_breeds()
        logger.info("Loaded %d doggo breeds", len(doggo.breeds))

    async def post_shutdown(application: Application) -> None:
        await client.aclose()

    application = (
        ApplicationBuilder()
        .token(token)
        .concurrent_updates(True)
        .post_init(post_init)
        .post_shutdown(post_shutdown)
        .build()
    )

    logger.info("Setting up commands...")
    registry = build_registry()
    handler_groups = [
        get_help_handlers(registry),
        get_text_handlers(registry, settings.RES_DIR),
        get_media_handlers(registry, sender, settings.RES_DIR),
        get_api_handlers(client),
        get_love_test_handlers(),
        get_doggo_handlers(doggo, sender),
        get_flausch_handlers(client, sender),
    ]
    for handlers in handler_groups:
        for h in handlers:
            application.add_handler(h)
    application.add_error_handler(error_handler)
    return application


def main() -> None:
    """Set up and run the bot."""
    token = settings.BOT_TOKEN
    if not token:
        logger.error("BOT_TOKEN is not set in environment variables.")
        sys.exit(1)

    application = build_application(token)

    logger.info("Starting bot polling...")
    application.run_polling(allowed_updates=[Update.MESSAGE])


if __name__ == "__main__":
    logger.info("Starting bot...")
    main()
