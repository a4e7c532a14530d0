"""Tests for the character and battle services."""

import pytest

from rpg_arena.engine import BattleEngine
from rpg_arena.errors import BattleStalledError, CharacterNotFoundError, InvalidBattleRequestError
from rpg_arena.models import Character, JobType
from rpg_arena.repositories import CharacterRepository
from rpg_arena.services import BattleService, CharacterService

from .conftest import ScriptedRandom


class TestCharacterService:
    """Tests for CharacterService."""

    def test_create_saves_character(self, character_service: CharacterService, repository: CharacterRepository):
        """Creating stores a full-health character with a new id."""
        character = character_service.create("Aragorn", JobType.WARRIOR)

        assert character.id == "1"
        assert character.current_hp == 20
        assert repository.find_by_id("1") is character

    def test_find_all(self, character_service: CharacterService):
        character_service.create("Aragorn", JobType.WARRIOR)
        character_service.create("Legolas", JobType.THIEF)
        assert [c.name for c in character_service.find_all()] == ["Aragorn", "Legolas"]

    def test_find_one(self, character_service: CharacterService, warrior: Character):
        assert character_service.find_one(warrior.id) is warrior

    def test_find_one_missing(self, character_service: CharacterService):
        """Unknown ids raise a not-found error carrying the id."""
        with pytest.raises(CharacterNotFoundError, match="^Character with ID 42 not found$") as exc_info:
            character_service.find_one("42")
        assert exc_info.value.character_id == "42"


class SpyRepository(CharacterRepository):
    """Repository that records update calls."""

    def __init__(self) -> None:
        super().__init__()
        self.updated: list[str] = []

    def update(self, character: Character) -> Character:
        self.updated.append(character.id)
        return super().update(character)


class TestBattleService:
    """Tests for BattleService."""

    def test_battle_commits_both_characters(self):
        """Both fighters are written back after the battle."""
        repository = SpyRepository()
        warrior = repository.save(Character.create("Conan", JobType.WARRIOR))
        thief = repository.save(Character.create("Garrett", JobType.THIEF))
        thief.take_damage(10)
        engine = BattleEngine(repository.find_by_id, rng=ScriptedRandom([0.9, 0.0, 0.95]))
        service = BattleService(repository, engine)

        result = service.execute_battle(warrior.id, thief.id)

        assert result.winner_id == warrior.id
        assert repository.updated == [warrior.id, thief.id]
        assert repository.find_by_id(thief.id).current_hp == 0

    def test_rejected_battle_commits_nothing(self):
        repository = SpyRepository()
        warrior = repository.save(Character.create("Conan", JobType.WARRIOR))
        service = BattleService(repository)

        with pytest.raises(InvalidBattleRequestError):
            service.execute_battle(warrior.id, warrior.id)
        assert repository.updated == []

    def test_loser_cannot_battle_again(self, battle_service: BattleService, warrior: Character, thief: Character, mage: Character):
        """Death persists: the loser is rejected from the next battle."""
        result = battle_service.execute_battle(warrior.id, thief.id)
        winner_id = result.winner_id

        with pytest.raises(InvalidBattleRequestError, match=f"^{result.loser_name} is already dead$"):
            battle_service.execute_battle(result.loser_id, mage.id)

        # The winner keeps its reduced HP into the next fight
        second = battle_service.execute_battle(winner_id, mage.id)
        assert second.log[0].startswith(f"Battle between {result.winner_name}")
        assert f"- {result.winner_remaining_hp} HP and Merlin" in second.log[0]

    def test_default_engine_reads_repository(self, repository: CharacterRepository):
        service = BattleService(repository)
        assert service.engine.lookup == repository.find_by_id

    def test_stalled_battle_leaves_store_unchanged(self):
        """A battle that hits the round cap stores no damage and commits nothing."""
        repository = SpyRepository()
        warrior = repository.save(Character.create("Conan", JobType.WARRIOR))
        thief = repository.save(Character.create("Garrett", JobType.THIEF))
        engine = BattleEngine(repository.find_by_id, rng=ScriptedRandom([0.9, 0.0, 0.95, 0.5]), max_rounds=1)
        service = BattleService(repository, engine)

        with pytest.raises(BattleStalledError):
            service.execute_battle(warrior.id, thief.id)

        assert repository.find_by_id(warrior.id).current_hp == 20
        assert repository.find_by_id(thief.id).current_hp == 15
        assert repository.updated == []
