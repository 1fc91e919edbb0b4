from __future__ import annotations

from typing import Iterable

from ..common.validators import require_non_empty
from ..core.enums import DIRECTORY_ROLES, Role
from ..core.exceptions import AuthorizationError, ValidationError
from .model import User
from .repository import UserRepository


def require_role(users: UserRepository, user_id: int, allowed: Iterable[Role]) -> User:
    """Load the acting user and check their role.

    Shared by every service with role-gated reads.
    """
    user = users.get_by_id(int(user_id))
    if not user or not user.is_active or user.role not in allowed:
        raise AuthorizationError("Access denied")
    return user


def _parse_role(value) -> Role:
    if value is None or value == "":
        return Role.EMPLOYEE
    try:
        return Role(str(value).strip().lower())
    except ValueError:
        raise ValidationError(f"Unknown role: {value}")


class UserService:
    """Use case: browse and extend the user directory."""

    def __init__(self, users: UserRepository):
        self._users = users

    def list_users(self, *, requested_by: int) -> list[dict]:
        require_role(self._users, requested_by, DIRECTORY_ROLES)
        return [u.as_public_dict() for u in self._users.list_all()]

    def add_user(self, *, requested_by: int, payload: dict) -> int:
        """Create a directory entry; credentials are set up by the login service."""
        require_role(self._users, requested_by, DIRECTORY_ROLES)

        username = require_non_empty(str(payload.get("username") or ""), "Username")
        full_name = require_non_empty(str(payload.get("name") or ""), "Name")
        email = str(payload.get("email") or "").strip()
        role = _parse_role(payload.get("role"))

        if self._users.get_by_username(username):
            raise ValidationError("Username already exists")

        return self._users.create(full_name=full_name, username=username, email=email, role=role)
