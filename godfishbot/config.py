"""Configuration loader using environment variables."""
from __future__ import annotations

import os
from dataclasses import dataclass
from dotenv import load_dotenv

# Load .env file if present
load_dotenv()

BOT_VERSION = "0.3.0"


@dataclass
class Settings:
    # Telegram
    BOT_TOKEN: str = os.getenv("BOT_TOKEN", "")

    # Bundled assets (txt/, images/, sound/, stars/ ...)
    RES_DIR: str = os.getenv("RES_DIR", "res")

    # Outbound HTTP
    HTTP_TIMEOUT: float = float(os.getenv("HTTP_TIMEOUT", 10))  # seconds
    USER_AGENT: str = os.getenv(
        "USER_AGENT",
        "godfishbot-ng (https://github.com/Follpvosten/godfishbot-ng)",
    )

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


settings = Settings()
