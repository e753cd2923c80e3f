# app/db/models/game.py
"""
SQLAlchemy model for app listings (one row per game per platform store).
Rows are created through the CRUD endpoints or bulk-imported from the
Top-100 feeds.
"""

from sqlalchemy import Column, Integer, String, Boolean
from app.db.base import Base, TimestampMixin

# Game Table
class Game(TimestampMixin, Base):
    __tablename__ = "games"

    id = Column(Integer, primary_key=True, autoincrement=True)
    publisher_id = Column(String, nullable=True)
    name = Column(String, nullable=True, index=True)
    platform = Column(String, nullable=True, index=True)  # e.g. "android", "ios"
    store_id = Column(String, nullable=True)  # id in the platform's app store
    bundle_id = Column(String, nullable=True)
    app_version = Column(String, nullable=True)
    is_published = Column(Boolean, nullable=True)

    def __repr__(self):
        return f"<Game id={self.id} name={self.name!r} platform={self.platform!r}>"
