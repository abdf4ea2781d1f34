from typing import Optional


class NotificationError(Exception):
    """Base class for every failure surfaced while building a notification."""
    pass


class ValidationError(NotificationError):
    """The payload is missing, malformed or violates a template invariant."""
    pass


class MissingRequiredFieldError(ValidationError):
    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Required field \"{field}\" not found or null.")


class InvalidFieldValueError(ValidationError):
    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"Field \"{field}\" is invalid: {reason}")


class InvalidCardinalityError(ValidationError):
    """
    `expected` is either an exact count or an inclusive (min, max) range.
    """
    def __init__(self, kind: str, expected, actual: int):
        self.kind = kind
        self.expected = expected
        self.actual = actual
        if isinstance(expected, tuple):
            wanted = f"{expected[0]} to {expected[1]}"
        else:
            wanted = str(expected)
        super().__init__(f"{kind} requires {wanted} items, got {actual}.")


class InvalidScheduleError(ValidationError):
    def __init__(self, seconds_until_fire: int, reason: Optional[str] = None):
        self.seconds_until_fire = seconds_until_fire
        super().__init__(
            reason
            or "Remind later timestamp or duration is less than or equal to current timestamp, "
               "cannot schedule notification for later."
        )


class ConstructionFailedError(NotificationError):
    """A collaborator result made the notification impossible to build."""
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)
