"""Character service - handles character creation and retrieval."""

import logging

from ..errors import CharacterNotFoundError
from ..models.character import Character
from ..models.enums import JobType
from ..repositories.characters import CharacterRepository

logger = logging.getLogger(__name__)


class CharacterService:
    """Service for character operations."""

    def __init__(self, repository: CharacterRepository) -> None:
        self.repository = repository

    def create(self, name: str, job: JobType) -> Character:
        """Create and store a new character at full health.

        Args:
            name: Character name (validated by the API layer)
            job: Character class

        Returns:
            The saved character with its assigned id
        """
        character = self.repository.save(Character.create(name, job))
        logger.info("Created %s %s with id %s", job.value, name, character.id)
        return character

    def find_all(self) -> list[Character]:
        return self.repository.find_all()

    def find_one(self, character_id: str) -> Character:
        """Get character by ID.

        Raises:
            CharacterNotFoundError: If no character has this id
        """
        character = self.repository.find_by_id(character_id)
        if character is None:
            raise CharacterNotFoundError(character_id)
        return character
