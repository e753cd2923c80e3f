"""
Game endpoints: list, create, search, update, delete and the Top-100 populate import.
"""

from typing import List, Optional
from fastapi import APIRouter, Depends
from app.db.deps import get_game_store
from app.models.schemas import GamePayload, GameSearch, GameOut, GameDeleted
from app.services.game_store import GameStore
from app.services.top100_importer import Top100Importer, get_top100_importer

router = APIRouter()


@router.get("", response_model=List[GameOut])
def list_games(store: GameStore = Depends(get_game_store)):
    return store.list_all()


@router.post("", response_model=GameOut)
def create_game(payload: GamePayload, store: GameStore = Depends(get_game_store)):
    return store.create(payload.to_record())


@router.post("/search", response_model=List[GameOut])
def search_games(payload: Optional[GameSearch] = None, store: GameStore = Depends(get_game_store)):
    # 🔍 No body or no filters → same as listing everything
    if payload is None:
        return store.list_all()
    return store.search(name=payload.name, platform=payload.platform)


# 📥 Pull both Top-100 feeds and bulk insert them; "ok" only once the insert committed
@router.post("/populate", response_model=str)
async def populate_games(
    store: GameStore = Depends(get_game_store),
    importer: Top100Importer = Depends(get_top100_importer),
):
    await importer.populate(store)
    return "ok"


@router.put("/{game_id}", response_model=GameOut)
def update_game(game_id: int, payload: GamePayload, store: GameStore = Depends(get_game_store)):
    return store.update(game_id, payload.to_record())


@router.delete("/{game_id}", response_model=GameDeleted)
def delete_game(game_id: int, store: GameStore = Depends(get_game_store)):
    return {"id": store.delete(game_id)}
