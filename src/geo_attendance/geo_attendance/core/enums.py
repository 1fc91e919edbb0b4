from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User roles used for permission checks."""

    ADMIN = "admin"
    HR = "hr"
    MANAGER = "manager"
    EMPLOYEE = "employee"


class AttendanceStatus(str, Enum):
    """Attendance status as stored in the database."""

    PRESENT = "present"
    HALF_DAY = "half_day"
    ABSENT = "absent"


class NotificationKind(str, Enum):
    PUNCH_IN = "punch_in"
    PUNCH_OUT = "punch_out"


# Roles allowed to see everybody's attendance and analytics.
SUPERVISOR_ROLES = frozenset({Role.ADMIN, Role.HR, Role.MANAGER})

# Roles allowed to browse the user directory.
DIRECTORY_ROLES = frozenset({Role.ADMIN, Role.HR})
