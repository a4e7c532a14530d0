"""Battle engine - runs a two-character fight from start to finish."""

import logging
import random
from collections.abc import Callable

from ..errors import BattleStalledError, InvalidBattleRequestError
from ..models.character import Character
from .logging import BattleEventType, BattleLogger
from .rolls import roll_damage, roll_speed
from .types import BattleContext, BattlePhase, BattleResult, TurnOrder

logger = logging.getLogger(__name__)

CharacterLookup = Callable[[str], Character | None]

DEFAULT_MAX_ROUNDS = 10_000
DEFAULT_MAX_SPEED_REROLLS = 10_000


class BattleEngine:
    """Simulates turn-based battles between two characters.

    The engine only reads from the store through ``lookup``. Characters are
    mutated in place; the caller must write both back after the battle.
    """

    def __init__(
        self,
        lookup: CharacterLookup,
        rng: random.Random | None = None,
        max_rounds: int = DEFAULT_MAX_ROUNDS,
        max_speed_rerolls: int = DEFAULT_MAX_SPEED_REROLLS,
    ) -> None:
        """Initialize the engine.

        Args:
            lookup: Returns the character for an id, or None if missing
            rng: Source of ``random()`` draws (defaults to a fresh Random)
            max_rounds: Rounds allowed before the battle is declared stalled
            max_speed_rerolls: Tied initiative re-rolls allowed per round
        """
        self.lookup = lookup
        self.rng = rng if rng is not None else random.Random()
        self.max_rounds = max_rounds
        self.max_speed_rerolls = max_speed_rerolls

    def execute_battle(self, character_id1: str, character_id2: str) -> BattleResult:
        """Run a battle between two stored characters.

        Args:
            character_id1: ID of the first character
            character_id2: ID of the second character

        Returns:
            BattleResult with winner, loser and the full log

        Raises:
            InvalidBattleRequestError: If a character is missing or dead, or
                both ids are the same. Raised before anything is mutated.
            BattleStalledError: If a safety cap is hit. Both characters are
                restored to their starting HP first.
        """
        char1, char2 = self._validate(character_id1, character_id2)

        context = BattleContext(first=char1, second=char2)
        battle_logger = BattleLogger()
        battle_logger.log_battle_start(char1, char2)

        starting_hp = (char1.current_hp, char2.current_hp)
        context.phase = BattlePhase.ROUND_IN_PROGRESS
        try:
            while context.both_alive:
                if context.round_number >= self.max_rounds:
                    raise BattleStalledError(f"Battle exceeded {self.max_rounds} rounds")
                context.round_number += 1
                self._execute_round(context, battle_logger)
        except BattleStalledError:
            char1.current_hp, char2.current_hp = starting_hp
            raise
        context.phase = BattlePhase.CONCLUDED

        winner, loser = (char1, char2) if char1.is_alive else (char2, char1)
        battle_logger.log_winner(context.round_number, winner)
        battle_log = battle_logger.get_log()

        logger.info(
            "Battle %s vs %s: %s won with %d HP after %d rounds and %d attacks",
            char1.id,
            char2.id,
            winner.name,
            winner.current_hp,
            context.round_number,
            len(battle_log.get_entries_by_type(BattleEventType.ATTACK)),
        )
        logger.debug("Battle transcript:\n%s", battle_log.format_readable())

        return BattleResult(
            winner_id=winner.id,
            winner_name=winner.name,
            winner_remaining_hp=winner.current_hp,
            loser_id=loser.id,
            loser_name=loser.name,
            log=battle_log.lines(),
            rounds=context.round_number,
            combatants=(char1, char2),
        )

    def _validate(self, character_id1: str, character_id2: str) -> tuple[Character, Character]:
        """Check battle preconditions in order, failing on the first."""
        char1 = self.lookup(character_id1)
        char2 = self.lookup(character_id2)

        if char1 is None:
            raise InvalidBattleRequestError(f"Character with ID {character_id1} not found")
        if char2 is None:
            raise InvalidBattleRequestError(f"Character with ID {character_id2} not found")

        if not char1.is_alive:
            raise InvalidBattleRequestError(f"{char1.name} is already dead")
        if not char2.is_alive:
            raise InvalidBattleRequestError(f"{char2.name} is already dead")

        if character_id1 == character_id2:
            raise InvalidBattleRequestError("Cannot battle the same character")

        return char1, char2

    def _execute_round(self, context: BattleContext, battle_logger: BattleLogger) -> None:
        """Roll initiative, then trade blows. A killing first blow ends the round."""
        order = self._determine_turn_order(context.first, context.second)
        battle_logger.log_turn_order(
            context.round_number,
            order.first,
            order.second,
            order.first_speed,
            order.second_speed,
        )
        logger.debug(
            "Round %d: %s (%d) before %s (%d) after %d re-rolls",
            context.round_number,
            order.first.name,
            order.first_speed,
            order.second.name,
            order.second_speed,
            order.rerolls,
        )

        self._execute_attack(context.round_number, order.first, order.second, battle_logger)

        if order.second.is_alive:
            self._execute_attack(context.round_number, order.second, order.first, battle_logger)

    def _determine_turn_order(self, char1: Character, char2: Character) -> TurnOrder:
        """Roll speed for both; re-roll both on a tie. Higher roll goes first."""
        rerolls = 0
        speed1 = roll_speed(char1, self.rng)
        speed2 = roll_speed(char2, self.rng)
        while speed1 == speed2:
            if rerolls >= self.max_speed_rerolls:
                raise BattleStalledError(f"Initiative still tied after {self.max_speed_rerolls} re-rolls")
            rerolls += 1
            speed1 = roll_speed(char1, self.rng)
            speed2 = roll_speed(char2, self.rng)

        if speed1 > speed2:
            return TurnOrder(first=char1, second=char2, first_speed=speed1, second_speed=speed2, rerolls=rerolls)
        return TurnOrder(first=char2, second=char1, first_speed=speed2, second_speed=speed1, rerolls=rerolls)

    def _execute_attack(
        self,
        round_number: int,
        attacker: Character,
        defender: Character,
        battle_logger: BattleLogger,
    ) -> None:
        damage = roll_damage(attacker, self.rng)
        defender.take_damage(damage)
        battle_logger.log_attack(round_number, attacker, defender, damage)
