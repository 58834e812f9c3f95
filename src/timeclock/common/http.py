from __future__ import annotations

from functools import wraps

from flask import jsonify, request, session

from ..core.enums import ErrorKind, Role
from ..core.exceptions import AuthenticationError, AuthorizationError, DomainError, ValidationError

STATUS_BY_KIND = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.FORBIDDEN: 403,
    ErrorKind.CONFLICT: 409,
    ErrorKind.TRANSIENT: 503,
}


def ok(status=200, **payload):
    return jsonify({"success": True, **payload}), status


def fail(message="Bad Request", status=400):
    return jsonify({"success": False, "error": message}), status


def fail_from(exc: DomainError):
    # Credential failures are 401 regardless of which lookup failed.
    if isinstance(exc, AuthenticationError):
        return fail(str(exc), status=401)
    return fail(str(exc), status=STATUS_BY_KIND.get(exc.kind, 400))


def json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object.")
    return data


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "worker_id" not in session:
            return fail("Please sign in to continue.", status=401)
        return view(*args, **kwargs)

    return wrapper


def reviewer_required(view):
    """Allow supervisors, managers and admins (the manager console)."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        if "worker_id" not in session:
            return fail("Please sign in to continue.", status=401)
        try:
            role = Role(session.get("role"))
        except ValueError:
            role = Role.WORKER
        if not role.can_review:
            return fail_from(AuthorizationError("You do not have permission to do that."))
        return view(*args, **kwargs)

    return wrapper
