"""In-memory character repository."""

from ..models.character import Character


class CharacterRepository:
    """Owns every character for the lifetime of the process.

    Ids are sequential numeric strings starting at "1". They are never
    reused until ``clear()`` resets the sequence. There is no locking;
    callers serialize writes.
    """

    def __init__(self) -> None:
        self._characters: dict[str, Character] = {}
        self._id_counter = 1

    def _generate_id(self) -> str:
        character_id = str(self._id_counter)
        self._id_counter += 1
        return character_id

    def save(self, character: Character) -> Character:
        """Store a character, assigning an id if it has none.

        Args:
            character: Character to save

        Returns:
            The same character, now carrying its id
        """
        if not character.id:
            character.id = self._generate_id()
        self._characters[character.id] = character
        return character

    def find_by_id(self, character_id: str) -> Character | None:
        """Get character by ID."""
        return self._characters.get(character_id)

    def find_all(self) -> list[Character]:
        """All characters in creation order."""
        return list(self._characters.values())

    def update(self, character: Character) -> Character:
        """Write a (possibly mutated) character back under its id."""
        self._characters[character.id] = character
        return character

    def delete(self, character_id: str) -> bool:
        return self._characters.pop(character_id, None) is not None

    def exists(self, character_id: str) -> bool:
        return character_id in self._characters

    def count(self) -> int:
        return len(self._characters)

    def clear(self) -> None:
        """Drop all characters and restart ids at "1"."""
        self._characters.clear()
        self._id_counter = 1
