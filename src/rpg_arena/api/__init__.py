"""HTTP API - Flask application factory."""

from flask import Flask

from ..config import Settings, get_settings
from ..engine.battle import BattleEngine
from ..repositories.characters import CharacterRepository
from ..services.battles import BattleService
from ..services.characters import CharacterService
from .battles import battles_bp
from .characters import characters_bp
from .context import EXTENSION_KEY, ArenaServices, get_services
from .errors import register_error_handlers
from .health import health_bp


def create_app(
    settings: Settings | None = None,
    repository: CharacterRepository | None = None,
    engine: BattleEngine | None = None,
) -> Flask:
    """Create the Flask app with its services and blueprints.

    Args:
        settings: Settings to use (defaults to the cached environment settings)
        repository: Character store (defaults to a new empty one)
        engine: Battle engine (defaults to one reading from ``repository``)
    """
    settings = settings if settings is not None else get_settings()
    repository = repository if repository is not None else CharacterRepository()
    if engine is None:
        engine = BattleEngine(
            repository.find_by_id,
            max_rounds=settings.max_rounds,
            max_speed_rerolls=settings.max_speed_rerolls,
        )

    app = Flask(__name__)
    app.config["DEBUG"] = settings.debug
    app.json.sort_keys = False

    app.extensions[EXTENSION_KEY] = ArenaServices(
        repository=repository,
        characters=CharacterService(repository),
        battles=BattleService(repository, engine),
        settings=settings,
    )

    app.register_blueprint(characters_bp)
    app.register_blueprint(battles_bp)
    app.register_blueprint(health_bp)
    register_error_handlers(app)

    return app


__all__ = ["create_app", "get_services", "ArenaServices"]
