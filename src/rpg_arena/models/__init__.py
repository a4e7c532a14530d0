"""Character and job models."""

from .character import Character
from .enums import CharacterStatus, JobType
from .jobs import JOB_CONFIGS, BaseStats, JobConfig, get_job_config

__all__ = [
    "BaseStats",
    "Character",
    "CharacterStatus",
    "JOB_CONFIGS",
    "JobConfig",
    "JobType",
    "get_job_config",
]
