"""
Provides dependencies for FastAPI routes: a DB session and the game store.

Ensures session is opened and closed cleanly per request.
"""


from typing import Generator
from fastapi import Depends
from sqlalchemy.orm import Session
from app.db.session import SessionLocal
from app.services.game_store import GameStore

def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def get_game_store(db: Session = Depends(get_db)) -> GameStore:
    return GameStore(db)
