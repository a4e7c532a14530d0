"""Domain exceptions.

The HTTP layer maps these onto status codes; nothing below ``api`` knows
about HTTP.
"""


class RpgArenaError(Exception):
    """Base class for all domain failures."""


class CharacterNotFoundError(RpgArenaError):
    """Raised when a character id does not exist in the store."""

    def __init__(self, character_id: str) -> None:
        super().__init__(f"Character with ID {character_id} not found")
        self.character_id = character_id


class InvalidBattleRequestError(RpgArenaError):
    """Raised when two characters cannot battle (missing, dead, or identical)."""


class BattleStalledError(RpgArenaError):
    """Raised when a battle exceeds its round or re-roll safety cap."""
