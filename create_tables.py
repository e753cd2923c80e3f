"""
create_tables.py

Creates the games table directly from the SQLAlchemy models, without alembic.
Handy for a local SQLite database; use `alembic upgrade head` everywhere else.
"""

import logging

from app.core import logging_config  # noqa: F401
from app.db.base import Base
from app.db.session import engine

# Ensure all models are imported before calling create_all
from app.db import models  # noqa: F401

logger = logging.getLogger(__name__)

def init_db():
    logger.info(f"Creating tables on {engine.url.render_as_string(hide_password=True)}")
    Base.metadata.create_all(bind=engine)
    logger.info("Done.")

if __name__ == "__main__":
    init_db()
