"""Map domain and validation failures onto JSON error responses."""

import logging
from typing import Any

from flask import Flask, jsonify
from pydantic import ValidationError
from werkzeug.exceptions import HTTPException
from werkzeug.http import HTTP_STATUS_CODES

from ..errors import BattleStalledError, CharacterNotFoundError, InvalidBattleRequestError

logger = logging.getLogger(__name__)


class BadRequestBody(Exception):
    """Raised when a request body is missing or not a JSON object."""


def error_response(status_code: int, message: str | list[str]):
    body = {
        "statusCode": status_code,
        "error": HTTP_STATUS_CODES.get(status_code, "Unknown Error"),
        "message": message,
    }
    return jsonify(body), status_code


def format_validation_errors(exc: ValidationError) -> list[str]:
    """One message per failed field.

    Custom validator messages are passed through as-is; pydantic's own
    messages are prefixed with the field name.
    """
    messages: list[str] = []
    for err in exc.errors():
        ctx: dict[str, Any] = err.get("ctx") or {}
        if err["type"] == "value_error" and "error" in ctx:
            messages.append(str(ctx["error"]))
        else:
            field = ".".join(str(part) for part in err["loc"])
            messages.append(f"{field}: {err['msg']}")
    return messages


def register_error_handlers(app: Flask) -> None:
    """Install JSON error handlers on the app."""

    @app.errorhandler(CharacterNotFoundError)
    def handle_not_found(exc: CharacterNotFoundError):
        return error_response(404, str(exc))

    @app.errorhandler(InvalidBattleRequestError)
    def handle_invalid_battle(exc: InvalidBattleRequestError):
        logger.warning("Rejected battle request: %s", exc)
        return error_response(400, str(exc))

    @app.errorhandler(BattleStalledError)
    def handle_stalled(exc: BattleStalledError):
        logger.error("Battle stalled: %s", exc)
        return error_response(500, str(exc))

    @app.errorhandler(ValidationError)
    def handle_validation(exc: ValidationError):
        return error_response(400, format_validation_errors(exc))

    @app.errorhandler(BadRequestBody)
    def handle_bad_body(exc: BadRequestBody):
        return error_response(400, str(exc))

    @app.errorhandler(HTTPException)
    def handle_http(exc: HTTPException):
        return error_response(exc.code or 500, exc.description or "")
