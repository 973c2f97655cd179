"""Shared helpers for the JSON controllers."""

from __future__ import annotations

import logging
from functools import wraps

from flask import jsonify, session

from ..core.enums import Role
from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DomainError,
    DuplicateUsername,
    PunchError,
    RecordNotFound,
)

logger = logging.getLogger(__name__)


def ok(**payload):
    return jsonify({"success": True, **payload})


def fail(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def status_for(error: DomainError) -> int:
    if isinstance(error, AuthenticationError):
        return 401
    if isinstance(error, AuthorizationError):
        return 403
    if isinstance(error, RecordNotFound):
        return 404
    if isinstance(error, (PunchError, DuplicateUsername)):
        return 409
    return 400


def current_role() -> Role:
    return Role(session.get("role"))


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "username" not in session:
            return fail("Please log in to continue.", 401)
        return view(*args, **kwargs)

    return wrapper


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "username" not in session:
            return fail("Please log in to continue.", 401)
        if session.get("role") != Role.ADMIN.value:
            return fail("You do not have permission", 403)
        return view(*args, **kwargs)

    return wrapper


def handle_errors(action: str):
    """Turn domain errors into user-facing messages and anything else into a 500."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except DomainError as e:
                return fail(str(e), status_for(e))
            except Exception:
                logger.exception("Unexpected failure while %s", action)
                return fail(f"System error while {action}", 500)

        return wrapper

    return decorator
