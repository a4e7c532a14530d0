"""Request and response schemas for the HTTP API."""

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..engine.types import BattleResult
from ..models.character import Character
from ..models.enums import CharacterStatus, JobType

NAME_PATTERN = re.compile(r"[a-zA-Z_]{4,15}")
NAME_MESSAGE = "Name must contain only letters or underscore and be between 4 and 15 characters"
JOB_MESSAGE = f"Job must be one of: {', '.join(job.value for job in JobType)}"


# =============================================================================
# Requests
# =============================================================================


class CreateCharacterRequest(BaseModel):
    """Body of ``POST /characters``."""

    name: str = Field(description="Character name (4-15 characters, letters and underscores only)")
    job: JobType = Field(description="Character job class")

    @field_validator("name")
    @classmethod
    def check_name(cls, value: str) -> str:
        if not NAME_PATTERN.fullmatch(value):
            raise ValueError(NAME_MESSAGE)
        return value

    @field_validator("job", mode="before")
    @classmethod
    def check_job(cls, value: Any) -> Any:
        if value not in [job.value for job in JobType]:
            raise ValueError(JOB_MESSAGE)
        return value


class CreateBattleRequest(BaseModel):
    """Body of ``POST /battles``."""

    model_config = ConfigDict(populate_by_name=True)

    character_id1: str = Field(alias="characterId1", description="ID of the first character")
    character_id2: str = Field(alias="characterId2", description="ID of the second character")


# =============================================================================
# Responses
# =============================================================================


class CharacterResponse(BaseModel):
    """Full character detail."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    job: JobType
    current_hp: int = Field(alias="currentHP")
    max_hp: int = Field(alias="maxHP")
    strength: int
    dexterity: int
    intelligence: int
    attack_modifier: float = Field(alias="attackModifier", description="Calculated attack modifier")
    speed_modifier: float = Field(alias="speedModifier", description="Calculated speed modifier")
    is_alive: bool = Field(alias="isAlive")

    @classmethod
    def from_character(cls, character: Character) -> "CharacterResponse":
        return cls(
            id=character.id,
            name=character.name,
            job=character.job,
            current_hp=character.current_hp,
            max_hp=character.max_hp,
            strength=character.strength,
            dexterity=character.dexterity,
            intelligence=character.intelligence,
            attack_modifier=character.attack_modifier,
            speed_modifier=character.speed_modifier,
            is_alive=character.is_alive,
        )


class CharacterListItem(BaseModel):
    """Summary row for ``GET /characters``."""

    id: str
    name: str
    job: JobType
    status: CharacterStatus

    @classmethod
    def from_character(cls, character: Character) -> "CharacterListItem":
        return cls(id=character.id, name=character.name, job=character.job, status=character.status)


class BattleResultResponse(BaseModel):
    """Outcome of ``POST /battles``."""

    model_config = ConfigDict(populate_by_name=True)

    winner_id: str = Field(alias="winnerId")
    winner_name: str = Field(alias="winnerName")
    winner_remaining_hp: int = Field(alias="winnerRemainingHP")
    loser_id: str = Field(alias="loserId")
    loser_name: str = Field(alias="loserName")
    log: list[str] = Field(description="Battle log with detailed turn-by-turn information")

    @classmethod
    def from_result(cls, result: BattleResult) -> "BattleResultResponse":
        return cls(**result.to_dict())


def dump(model: BaseModel) -> dict[str, Any]:
    """Serialize a response model with its camelCase aliases."""
    return model.model_dump(mode="json", by_alias=True)
