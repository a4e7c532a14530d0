"""Battle engine module - handles turn order, attacks and the battle log."""

from .battle import BattleEngine, CharacterLookup
from .logging import BattleEventType, BattleLog, BattleLogEntry, BattleLogger
from .rolls import roll, roll_damage, roll_speed
from .types import BattleContext, BattlePhase, BattleResult, TurnOrder

__all__ = [
    "BattleEngine",
    "CharacterLookup",
    "BattleResult",
    "BattleContext",
    "BattlePhase",
    "TurnOrder",
    "BattleLogger",
    "BattleLog",
    "BattleLogEntry",
    "BattleEventType",
    "roll",
    "roll_speed",
    "roll_damage",
]
