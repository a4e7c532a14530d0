"""Storage for game entities."""

from .characters import CharacterRepository

__all__ = ["CharacterRepository"]
