"""
Persistence operations for Game rows.

Every write commits once; on a database error the session is rolled back
and a StoreError is raised so the endpoint can answer with a 400.
"""

import logging
from typing import List, Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session as DBSession
from app.db.models.game import Game
from app.services.search_filter import build_game_filters
from app.utils.error_handler import GameNotFoundError, StoreError

logger = logging.getLogger(__name__)

GAME_FIELDS = (
    "publisher_id",
    "name",
    "platform",
    "store_id",
    "bundle_id",
    "app_version",
    "is_published",
)


class GameStore:
    def __init__(self, db: DBSession):
        self.db = db

    def _commit(self, message: str) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"{message}: {e}")
            raise StoreError(message, e)

    def list_all(self) -> List[Game]:
        try:
            return self.db.query(Game).order_by(Game.id).all()
        except SQLAlchemyError as e:
            logger.error(f"There was an error querying games: {e}")
            raise StoreError("There was an error querying games", e)

    def search(self, name: Optional[str] = None, platform: Optional[str] = None) -> List[Game]:
        filters = build_game_filters(name, platform)
        if not filters:
            return self.list_all()
        try:
            return self.db.query(Game).filter(*filters).order_by(Game.id).all()
        except SQLAlchemyError as e:
            scope = f"platform {platform}" if platform else "all platforms"
            logger.error(f"There was an error querying games with name {name} in {scope}: {e}")
            raise StoreError("There was an error searching games", e)

    def get(self, game_id: int) -> Optional[Game]:
        try:
            return self.db.get(Game, game_id)
        except SQLAlchemyError as e:
            logger.error(f"There was an error loading game {game_id}: {e}")
            raise StoreError("There was an error loading the game", e)

    def get_or_raise(self, game_id: int) -> Game:
        game = self.get(game_id)
        if game is None:
            raise GameNotFoundError(game_id)
        return game

    def create(self, fields: dict) -> Game:
        game = Game(**{key: fields.get(key) for key in GAME_FIELDS})
        self.db.add(game)
        self._commit("There was an error creating a game")
        self.db.refresh(game)
        return game

    def update(self, game_id: int, fields: dict) -> Game:
        game = self.get_or_raise(game_id)
        # full replace: anything missing from fields becomes None
        for key in GAME_FIELDS:
            setattr(game, key, fields.get(key))
        self._commit(f"Error updating game {game_id}")
        self.db.refresh(game)
        return game

    def delete(self, game_id: int) -> int:
        game = self.get_or_raise(game_id)
        self.db.delete(game)
        self._commit(f"Error deleting game {game_id}")
        return game_id

    def bulk_create(self, records: List[dict]) -> List[Game]:
        games = [Game(**{key: record.get(key) for key in GAME_FIELDS}) for record in records]
        self.db.add_all(games)
        self._commit("Error populating db with top 100 games in all platforms")
        return games
