"""
Loads environment variables from .env using python-dotenv.

Used throughout the app to configure the database and the Top-100 feeds.
"""

# app/core/config.py
from dotenv import load_dotenv
import os

load_dotenv()

DEFAULT_TOP100_URL_TEMPLATE = (
    "https://interview-marketing-eng-dev.s3.eu-west-1.amazonaws.com/{platform}.top100.json"
)


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./games.db")
    SQL_ECHO = _as_bool(os.getenv("SQL_ECHO", "false"))
    TOP100_URL_TEMPLATE = os.getenv("TOP100_URL_TEMPLATE", DEFAULT_TOP100_URL_TEMPLATE)
    TOP100_PLATFORMS = [
        p.strip() for p in os.getenv("TOP100_PLATFORMS", "android,ios").split(",") if p.strip()
    ]
    FEED_TIMEOUT_SECONDS = float(os.getenv("FEED_TIMEOUT_SECONDS", "10"))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

settings = Settings()
