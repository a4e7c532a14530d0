"""Speed and damage rolls."""

import math
import random
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..models.character import Character


def roll(modifier: float, rng: random.Random) -> int:
    """Roll an integer in ``[0, floor(modifier)]``.

    Computes ``floor(draw * (modifier + 1))`` with ``draw`` in ``[0, 1)``.
    For a fractional modifier the top value gets a narrower slice of the
    draw range (Mage speed 2.9 rolls 3 only for draws >= 3/3.9).
    """
    return math.floor(rng.random() * (modifier + 1))


def roll_speed(character: "Character", rng: random.Random) -> int:
    """Roll a character's initiative for one round."""
    return roll(character.speed_modifier, rng)


def roll_damage(character: "Character", rng: random.Random) -> int:
    """Roll the damage of one attack by ``character``."""
    return roll(character.attack_modifier, rng)
