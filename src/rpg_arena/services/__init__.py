"""Service layer for game logic."""

from .battles import BattleService
from .characters import CharacterService

__all__ = [
    "CharacterService",
    "BattleService",
]
