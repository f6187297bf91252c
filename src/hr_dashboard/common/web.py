from __future__ import annotations

import logging
from datetime import date
from functools import wraps
from typing import Optional

from flask import Flask, current_app, g, jsonify, request, session
from werkzeug.exceptions import HTTPException

from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DomainError,
    RecordNotFoundError,
    UserExistsError,
)
from ..users.service import SessionContext
from .datetime_utils import now_local, parse_date_arg

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = (
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (RecordNotFoundError, 404),
    (UserExistsError, 409),
)


def status_for(exc: DomainError) -> int:
    for exc_type, status in _STATUS_BY_ERROR:
        if isinstance(exc, exc_type):
            return status
    return 400


def error_result(message: str, status: int):
    """Failures are result values: ``{"error": message}``."""
    return jsonify({"error": message}), status


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def _domain_error(e: DomainError):
        return error_result(str(e), status_for(e))

    @app.errorhandler(HTTPException)
    def _http_error(e: HTTPException):
        return error_result(e.description or e.name, e.code or 500)

    @app.errorhandler(Exception)
    def _unexpected(e: Exception):
        logger.exception("unhandled error on %s %s", request.method, request.path)
        if bool(current_app.config.get("DEBUG", False)):
            return error_result(f"System error: {e}", 500)
        return error_result("System error", 500)


def payload() -> dict:
    """Request body from JSON or form fields."""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()


def date_arg(name: str = "date") -> date:
    value = request.args.get(name, "")
    if not value:
        return now_local().date()
    return parse_date_arg(value, name)


def sign_in_client(identity) -> None:
    """Bind ``identity`` to this client's cookie session."""
    session.clear()
    session["user_id"] = identity.id


def sign_out_client() -> None:
    session.pop("user_id", None)


def current_viewer(directory) -> Optional[SessionContext]:
    user_id = session.get("user_id")
    if not user_id:
        return None

    identity = directory.get_by_id(user_id)
    if identity is None:
        # The identity is gone from knownUsers; drop the stale cookie.
        session.pop("user_id", None)
        return None
    return SessionContext(identity)


def login_required(directory):
    """Resolve this client's viewer into ``g.viewer`` or answer 401."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            viewer = current_viewer(directory)
            if viewer is None:
                raise AuthenticationError("Please sign in to continue")
            g.viewer = viewer
            return view(*args, **kwargs)

        return wrapper

    return decorator


def admin_required(directory):
    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            viewer = current_viewer(directory)
            if viewer is None:
                raise AuthenticationError("Please sign in to continue")
            if not viewer.is_admin:
                raise AuthorizationError("You do not have permission")
            g.viewer = viewer
            return view(*args, **kwargs)

        return wrapper

    return decorator
