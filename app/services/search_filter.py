from typing import Optional
from app.db.models.game import Game

# 🔎 name → substring match, platform → exact match; empty values are ignored
def build_game_filters(name: Optional[str] = None, platform: Optional[str] = None) -> list:
    filters = []
    if name:
        filters.append(Game.name.contains(name, autoescape=True))
    if platform:
        filters.append(Game.platform == platform)
    return filters
