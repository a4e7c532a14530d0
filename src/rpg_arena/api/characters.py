"""Character endpoints."""

from flask import Blueprint, jsonify

from .context import get_services, parse_body
from .schemas import CharacterListItem, CharacterResponse, CreateCharacterRequest, dump

characters_bp = Blueprint("characters", __name__, url_prefix="/characters")


@characters_bp.post("")
def create_character():
    """Create a new character at full health."""
    payload = parse_body(CreateCharacterRequest)
    services = get_services()
    with services.store_lock:
        character = services.characters.create(payload.name, payload.job)
        body = dump(CharacterResponse.from_character(character))
    return jsonify(body), 201


@characters_bp.get("")
def list_characters():
    services = get_services()
    with services.store_lock:
        body = [dump(CharacterListItem.from_character(c)) for c in services.characters.find_all()]
    return jsonify(body)


@characters_bp.get("/<character_id>")
def get_character(character_id: str):
    services = get_services()
    with services.store_lock:
        body = dump(CharacterResponse.from_character(services.characters.find_one(character_id)))
    return jsonify(body)
