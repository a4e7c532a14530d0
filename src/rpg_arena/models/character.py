"""Character entity - the mutable combat unit owned by the store."""

from dataclasses import dataclass

from .enums import CharacterStatus, JobType
from .jobs import BaseStats, get_job_config


@dataclass
class Character:
    """A named fighter of a given job.

    Stats are copied from the job's base stats at creation. Only
    ``take_damage`` and ``heal`` change the character afterwards; the
    store assigns ``id`` once on first save.
    """

    name: str
    job: JobType
    current_hp: int
    max_hp: int
    strength: int
    dexterity: int
    intelligence: int
    id: str = ""

    @classmethod
    def create(cls, name: str, job: JobType) -> "Character":
        """Build a fresh, full-health character from the job catalog."""
        base = get_job_config(job).base_stats
        return cls(
            name=name,
            job=job,
            current_hp=base.health,
            max_hp=base.health,
            strength=base.strength,
            dexterity=base.dexterity,
            intelligence=base.intelligence,
        )

    def stats(self) -> BaseStats:
        """Current stats in the shape the job formulas expect."""
        return BaseStats(
            health=self.max_hp,
            strength=self.strength,
            dexterity=self.dexterity,
            intelligence=self.intelligence,
        )

    # Modifiers are recomputed on every access, never cached
    @property
    def attack_modifier(self) -> float:
        return get_job_config(self.job).attack_modifier(self.stats())

    @property
    def speed_modifier(self) -> float:
        return get_job_config(self.job).speed_modifier(self.stats())

    @property
    def is_alive(self) -> bool:
        return self.current_hp > 0

    @property
    def status(self) -> CharacterStatus:
        return CharacterStatus.ALIVE if self.is_alive else CharacterStatus.DEAD

    def take_damage(self, amount: int) -> None:
        """Lose HP, saturating at 0."""
        self._set_hp(self.current_hp - amount)

    def heal(self, amount: int) -> None:
        """Restore HP, saturating at max HP."""
        self._set_hp(self.current_hp + amount)

    def _set_hp(self, value: int) -> None:
        # Negative amounts must not push HP past either bound
        self.current_hp = max(0, min(self.max_hp, value))

    def __repr__(self) -> str:
        return f"<Character(id={self.id}, name={self.name}, job={self.job.value}, hp={self.current_hp})>"
