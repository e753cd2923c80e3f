"""
Defines the SQLAlchemy declarative base class and shared column mixins.

All ORM models will inherit from this base.
"""

# app/db/base.py
from datetime import datetime, timezone
from sqlalchemy import Column, DateTime
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TimestampMixin:
    """createdAt/updatedAt bookkeeping, maintained by the ORM on flush."""

    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)
