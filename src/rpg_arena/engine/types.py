"""Type definitions for the battle engine."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ..models.character import Character


class BattlePhase(str, Enum):
    """Lifecycle of a single battle."""

    NOT_STARTED = "not_started"
    ROUND_IN_PROGRESS = "round_in_progress"
    CONCLUDED = "concluded"


@dataclass
class BattleContext:
    """Working state for one battle.

    Holds the two borrowed characters; they are mutated in place and the
    caller is responsible for persisting them afterwards.
    """

    first: Character
    second: Character
    round_number: int = 0
    phase: BattlePhase = BattlePhase.NOT_STARTED

    @property
    def both_alive(self) -> bool:
        return self.first.is_alive and self.second.is_alive


@dataclass
class TurnOrder:
    """Who acts first this round and the rolls that decided it."""

    first: Character
    second: Character
    first_speed: int
    second_speed: int
    rerolls: int = 0


@dataclass
class BattleResult:
    """Outcome of a finished battle.

    ``combatants`` are the two characters the engine mutated, in request
    order, for the caller to write back. They are not part of ``to_dict()``.
    """

    winner_id: str
    winner_name: str
    winner_remaining_hp: int
    loser_id: str
    loser_name: str
    log: list[str] = field(default_factory=list)
    rounds: int = 0
    combatants: tuple[Character, ...] = field(default=(), repr=False)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "winner_id": self.winner_id,
            "winner_name": self.winner_name,
            "winner_remaining_hp": self.winner_remaining_hp,
            "loser_id": self.loser_id,
            "loser_name": self.loser_name,
            "log": list(self.log),
        }
