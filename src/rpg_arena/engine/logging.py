"""Battle log - the externally visible record of a battle.

Every line returned to clients is recorded as a structured entry so tests
and debug logging can query entries by event type, while ``lines()``
yields the plain strings in order.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..models.character import Character


class BattleEventType(str, Enum):
    """Types of battle log events."""

    BATTLE_START = "battle_start"
    TURN_ORDER = "turn_order"
    ATTACK = "attack"
    WINNER_DETERMINED = "winner_determined"


@dataclass
class BattleLogEntry:
    """A single line of the battle log."""

    event_type: BattleEventType
    round_number: int
    message: str

    # Event-specific data
    actor_name: str | None = None
    target_name: str | None = None
    value: int | None = None  # speed roll or damage
    target_value: int | None = None  # opponent's speed roll
    remaining_hp: int | None = None


@dataclass
class BattleLog:
    """Complete log of one battle."""

    entries: list[BattleLogEntry] = field(default_factory=list)

    def lines(self) -> list[str]:
        """The log messages in order."""
        return [entry.message for entry in self.entries]

    def get_entries_by_type(self, event_type: BattleEventType) -> list[BattleLogEntry]:
        """Get all entries of a specific type."""
        return [e for e in self.entries if e.event_type == event_type]

    def format_readable(self) -> str:
        """Format the log as a transcript grouped by round."""
        lines: list[str] = []
        current_round = -1

        for entry in self.entries:
            if entry.round_number != current_round:
                current_round = entry.round_number
                if current_round > 0:
                    lines.append(f"--- Round {current_round} ---")

            match entry.event_type:
                case BattleEventType.BATTLE_START | BattleEventType.WINNER_DETERMINED:
                    lines.append(entry.message)
                case _:
                    lines.append(f"  {entry.message}")

        return "\n".join(lines)


class BattleLogger:
    """Builds the battle log line by line.

    Usage:
        logger = BattleLogger()
        logger.log_battle_start(char1, char2)
        logger.log_turn_order(1, first, second, 5, 3)
        logger.log_attack(1, first, second, 4)
        logger.log_winner(1, first)
        lines = logger.get_log().lines()
    """

    def __init__(self) -> None:
        self._log = BattleLog()

    def get_log(self) -> BattleLog:
        return self._log

    def log_battle_start(self, first: "Character", second: "Character") -> None:
        """Log the opening line with both fighters' starting HP."""
        message = (
            f"Battle between {first.name} ({first.job.value}) - {first.current_hp} HP "
            f"and {second.name} ({second.job.value}) - {second.current_hp} HP begins!"
        )
        self._log.entries.append(
            BattleLogEntry(
                event_type=BattleEventType.BATTLE_START,
                round_number=0,
                message=message,
                actor_name=first.name,
                target_name=second.name,
            )
        )

    def log_turn_order(
        self,
        round_number: int,
        first: "Character",
        second: "Character",
        first_speed: int,
        second_speed: int,
    ) -> None:
        """Log which fighter won the initiative roll."""
        message = (
            f"{first.name} {first_speed} speed was faster than "
            f"{second.name} {second_speed} speed and will begin this round."
        )
        self._log.entries.append(
            BattleLogEntry(
                event_type=BattleEventType.TURN_ORDER,
                round_number=round_number,
                message=message,
                actor_name=first.name,
                target_name=second.name,
                value=first_speed,
                target_value=second_speed,
            )
        )

    def log_attack(self, round_number: int, attacker: "Character", defender: "Character", damage: int) -> None:
        """Log an attack after damage has been applied to the defender."""
        message = (
            f"{attacker.name} attacks {defender.name} for {damage}, "
            f"{defender.name} has {defender.current_hp} HP remaining."
        )
        self._log.entries.append(
            BattleLogEntry(
                event_type=BattleEventType.ATTACK,
                round_number=round_number,
                message=message,
                actor_name=attacker.name,
                target_name=defender.name,
                value=damage,
                remaining_hp=defender.current_hp,
            )
        )

    def log_winner(self, round_number: int, winner: "Character") -> None:
        message = f"{winner.name} wins the battle! {winner.name} still has {winner.current_hp} HP remaining!"
        self._log.entries.append(
            BattleLogEntry(
                event_type=BattleEventType.WINNER_DETERMINED,
                round_number=round_number,
                message=message,
                actor_name=winner.name,
                remaining_hp=winner.current_hp,
            )
        )
