"""Entry point for running the RPG Arena HTTP server."""

import logging

from rpg_arena.api import create_app
from rpg_arena.config import get_settings


def main() -> None:
    """Start the development server."""
    settings = get_settings()

    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    app = create_app(settings)

    logging.info("Starting RPG Arena on %s:%d...", settings.host, settings.port)
    app.run(host=settings.host, port=settings.port, debug=settings.debug)


if __name__ == "__main__":
    main()
