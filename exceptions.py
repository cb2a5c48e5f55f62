from typing import Optional


class SessionError(Exception):
    """Base class for errors raised by the session service."""


class NotFoundError(SessionError):
    """Schedule, room or active session does not exist."""


class ForbiddenError(SessionError):
    """Caller is not allowed to act on the schedule's room."""


class StoreError(SessionError):
    """A Redis operation failed. Carries the room/user it was working on."""

    def __init__(self, message: str, room_name: Optional[str] = None, user_name: Optional[str] = None):
        super().__init__(message)
        self.room_name = room_name
        self.user_name = user_name


class SerializationError(SessionError):
    """The room listing could not be encoded."""
