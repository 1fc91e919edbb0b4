from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: User.

    Plain data; credentials are owned by the login service and never loaded here.
    """

    user_id: int
    full_name: str
    username: str
    email: str
    role: Role
    is_active: bool = True

    def as_public_dict(self) -> dict:
        return {
            "id": self.user_id,
            "username": self.username,
            "name": self.full_name,
            "role": self.role.value,
            "email": self.email,
        }
