class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class PunchError(DomainError):
    """Raised when a punch-in or punch-out is rejected."""


class OutOfRangeError(PunchError):
    """The punch location is outside the office geofence."""

    def __init__(self, distance: int, allowed_radius: int):
        self.distance = distance
        self.allowed_radius = allowed_radius
        super().__init__(f"You are {distance}m away from office. Must be within {allowed_radius}m")


class TooEarlyError(PunchError):
    def __init__(self, message: str = "Punch in allowed only after 9:00 AM"):
        super().__init__(message)


class DuplicatePunchInError(PunchError):
    def __init__(self, message: str = "Already punched in today"):
        super().__init__(message)


class NoOpenPunchInError(PunchError):
    def __init__(self, message: str = "No punch in record found"):
        super().__init__(message)
