"""
Configures logging across the application.

Logs messages at the configured level with timestamp and log level.
"""

import logging

from app.core.config import settings

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)
