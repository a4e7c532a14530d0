"""Per-application service container and request helpers."""

import threading
from dataclasses import dataclass, field
from typing import TypeVar

from flask import current_app, request
from pydantic import BaseModel

from ..config import Settings
from ..repositories.characters import CharacterRepository
from ..services.battles import BattleService
from ..services.characters import CharacterService
from .errors import BadRequestBody

EXTENSION_KEY = "rpg_arena"

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass
class ArenaServices:
    """Services shared by every request of one app.

    ``store_lock`` serializes every store access, since neither the
    repository nor the battle engine synchronize access to characters.
    Reads take it too so they never observe a battle in progress.
    """

    repository: CharacterRepository
    characters: CharacterService
    battles: BattleService
    settings: Settings
    store_lock: threading.Lock = field(default_factory=threading.Lock)


def get_services() -> ArenaServices:
    """Services for the app handling the current request."""
    return current_app.extensions[EXTENSION_KEY]


def parse_body(model: type[ModelT]) -> ModelT:
    """Validate the JSON request body against a schema.

    Raises:
        BadRequestBody: If the body is not a JSON object
        pydantic.ValidationError: If a field fails validation
    """
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        raise BadRequestBody("Request body must be a JSON object")
    return model.model_validate(body)
