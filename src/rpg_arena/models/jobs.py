"""Job catalog - base stats and modifier formulas per character class."""

from collections.abc import Callable
from dataclasses import dataclass

from .enums import JobType


@dataclass(frozen=True)
class BaseStats:
    """The four stats every job is defined by."""

    health: int
    strength: int
    dexterity: int
    intelligence: int


ModifierFormula = Callable[[BaseStats], float]


@dataclass(frozen=True)
class JobConfig:
    """Base stats plus the attack/speed formulas for one job.

    Formulas are linear in the stats and are not rounded, so modifiers may be
    fractional (a Mage attacks with 14.2).
    """

    base_stats: BaseStats
    attack_modifier: ModifierFormula
    speed_modifier: ModifierFormula


WARRIOR = JobConfig(
    base_stats=BaseStats(health=20, strength=10, dexterity=5, intelligence=5),
    attack_modifier=lambda s: s.strength * 0.8 + s.dexterity * 0.2,
    speed_modifier=lambda s: s.dexterity * 0.6 + s.intelligence * 0.2,
)

THIEF = JobConfig(
    base_stats=BaseStats(health=15, strength=4, dexterity=10, intelligence=4),
    attack_modifier=lambda s: s.strength * 0.25 + s.dexterity * 1.0 + s.intelligence * 0.25,
    speed_modifier=lambda s: s.dexterity * 0.8,
)

MAGE = JobConfig(
    base_stats=BaseStats(health=12, strength=5, dexterity=6, intelligence=10),
    attack_modifier=lambda s: s.strength * 0.2 + s.dexterity * 0.2 + s.intelligence * 1.2,
    speed_modifier=lambda s: s.dexterity * 0.4 + s.strength * 0.1,
)


def get_job_config(job: JobType) -> JobConfig:
    """Look up the config for a job.

    Raises:
        ValueError: If ``job`` is not one of the three job types
    """
    match job:
        case JobType.WARRIOR:
            return WARRIOR
        case JobType.THIEF:
            return THIEF
        case JobType.MAGE:
            return MAGE
        case _:
            raise ValueError(f"Unknown job: {job}")


JOB_CONFIGS: dict[JobType, JobConfig] = {job: get_job_config(job) for job in JobType}
