"""Helpers shared by the JSON controllers."""

from __future__ import annotations

import logging
from functools import wraps

from flask import jsonify, request, session

from ..core.exceptions import AuthorizationError, DomainError, ValidationError

logger = logging.getLogger(__name__)


def fail(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def json_endpoint(view):
    """Require a session user and translate domain errors into JSON responses."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return fail("No session user", 401)
        try:
            return view(*args, **kwargs)
        except AuthorizationError as e:
            return fail(str(e), 403)
        except DomainError as e:
            return fail(str(e), 400)
        except Exception:
            logger.exception("unhandled error on %s %s", request.method, request.path)
            return fail("Internal server error", 500)

    return wrapper


def current_user_id() -> int:
    return int(session["user_id"])


def json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("JSON body required")
    return data
