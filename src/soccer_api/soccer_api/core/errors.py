from __future__ import annotations

import logging
from typing import Sequence

from flask import Flask, jsonify
from sqlalchemy.exc import IntegrityError
from werkzeug.exceptions import HTTPException

from .exceptions import (
    AccessDeniedError,
    AuthenticationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def error_response(status: int, message: str, raw_errors: Sequence[str] = ()):
    return jsonify({"success": False, "message": message, "rawErrors": list(raw_errors)}), status


def register_error_handlers(app: Flask) -> None:
    """Map domain exceptions to `{success, message, rawErrors}` responses."""

    @app.errorhandler(ValidationError)
    def handle_validation(e: ValidationError):
        return error_response(400, str(e), e.violations)

    @app.errorhandler(AccessDeniedError)
    def handle_access_denied(e: AccessDeniedError):
        return "", 401

    @app.errorhandler(AuthenticationError)
    def handle_authentication(e: AuthenticationError):
        return error_response(401, str(e))

    @app.errorhandler(NotFoundError)
    def handle_not_found(e: NotFoundError):
        return error_response(404, str(e))

    @app.errorhandler(ConflictError)
    def handle_conflict(e: ConflictError):
        return error_response(409, str(e))

    @app.errorhandler(IntegrityError)
    def handle_integrity(e: IntegrityError):
        logger.warning("integrity error: %s", e.orig)
        return error_response(409, "Operation conflicts with existing data")

    @app.errorhandler(HTTPException)
    def handle_http(e: HTTPException):
        return error_response(e.code or 500, e.description or e.name)

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        logger.exception("unhandled error")
        return error_response(500, "Internal server error")
