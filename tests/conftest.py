"""Shared fixtures for the test suite."""

from collections.abc import Iterable

import pytest

from rpg_arena.api import create_app
from rpg_arena.config import Settings
from rpg_arena.models import Character, JobType
from rpg_arena.repositories import CharacterRepository
from rpg_arena.services import BattleService, CharacterService


class ScriptedRandom:
    """Stand-in for random.Random that replays fixed draws in [0, 1)."""

    def __init__(self, draws: Iterable[float]) -> None:
        self._draws = iter(draws)
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        try:
            return next(self._draws)
        except StopIteration:
            raise AssertionError(f"ScriptedRandom ran out of draws after {self.calls - 1}") from None


@pytest.fixture
def repository() -> CharacterRepository:
    """Create an empty character store."""
    return CharacterRepository()


@pytest.fixture
def character_service(repository: CharacterRepository) -> CharacterService:
    return CharacterService(repository)


@pytest.fixture
def battle_service(repository: CharacterRepository) -> BattleService:
    return BattleService(repository)


@pytest.fixture
def warrior(repository: CharacterRepository) -> Character:
    """Create a stored warrior."""
    return repository.save(Character.create("Conan", JobType.WARRIOR))


@pytest.fixture
def thief(repository: CharacterRepository) -> Character:
    """Create a stored thief."""
    return repository.save(Character.create("Garrett", JobType.THIEF))


@pytest.fixture
def mage(repository: CharacterRepository) -> Character:
    """Create a stored mage."""
    return repository.save(Character.create("Merlin", JobType.MAGE))


@pytest.fixture
def settings() -> Settings:
    """Settings that ignore the environment and any .env file.

    The disk threshold is relaxed so health checks do not depend on the
    free space of the machine running the tests.
    """
    return Settings(_env_file=None, debug=False, health_disk_threshold=1.0)


@pytest.fixture
def app(settings: Settings, repository: CharacterRepository):
    """Create the Flask app backed by the test repository."""
    app = create_app(settings, repository=repository)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
