"""Enums for game models."""

from enum import Enum


class JobType(str, Enum):
    """Character classes - values double as display labels."""

    WARRIOR = "Warrior"
    THIEF = "Thief"
    MAGE = "Mage"


class CharacterStatus(str, Enum):
    """Life status shown in character listings."""

    ALIVE = "Alive"
    DEAD = "Dead"
