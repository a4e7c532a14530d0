"""Battle endpoints."""

from flask import Blueprint, jsonify

from .context import get_services, parse_body
from .schemas import BattleResultResponse, CreateBattleRequest, dump

battles_bp = Blueprint("battles", __name__, url_prefix="/battles")


@battles_bp.post("")
def create_battle():
    """Run a battle between two characters and return its log."""
    payload = parse_body(CreateBattleRequest)
    services = get_services()
    with services.store_lock:
        result = services.battles.execute_battle(payload.character_id1, payload.character_id2)
    return jsonify(dump(BattleResultResponse.from_result(result))), 201
