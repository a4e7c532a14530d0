"""Battle service - runs the engine and commits the results."""

from ..engine.battle import BattleEngine
from ..engine.types import BattleResult
from ..repositories.characters import CharacterRepository


class BattleService:
    """Service for battle operations."""

    def __init__(self, repository: CharacterRepository, engine: BattleEngine | None = None) -> None:
        self.repository = repository
        self.engine = engine if engine is not None else BattleEngine(repository.find_by_id)

    def execute_battle(self, character_id1: str, character_id2: str) -> BattleResult:
        """Run a battle and persist both fighters' new state.

        Args:
            character_id1: ID of the first character
            character_id2: ID of the second character

        Returns:
            BattleResult from the engine

        Raises:
            InvalidBattleRequestError: If the engine rejects the pairing
        """
        result = self.engine.execute_battle(character_id1, character_id2)

        # The engine mutates the characters it borrowed; write them back
        for character in result.combatants:
            self.repository.update(character)

        return result
