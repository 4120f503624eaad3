"""
Warden error types.

Every failure an operation can report carries a stable ``kind`` and a
human-readable message, so outer surfaces (CLI, HTTP) can render it without
knowing which step failed.
"""

from enum import Enum
from typing import Dict


class ErrorKind(str, Enum):
    """Stable error kinds shared by the invite and delete operations."""

    UNAUTHENTICATED = "unauthenticated"
    PERMISSION_DENIED = "permission-denied"
    INVALID_ARGUMENT = "invalid-argument"
    FAILED_PRECONDITION = "failed-precondition"
    NOT_FOUND = "not-found"
    INTERNAL = "internal"


class WardenError(Exception):
    """Base class for all Warden errors."""

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, str]:
        """Render as ``{"kind": ..., "message": ...}``."""
        return {"kind": self.kind.value, "message": self.message}

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value!r}, message={self.message!r})"


class UnauthenticatedError(WardenError):
    """No caller identity was supplied."""

    kind = ErrorKind.UNAUTHENTICATED


class PermissionDeniedError(WardenError):
    """The caller's profile role is not the admin role."""

    kind = ErrorKind.PERMISSION_DENIED


class InvalidArgumentError(WardenError, ValueError):
    """A required field is missing or malformed."""

    kind = ErrorKind.INVALID_ARGUMENT


class FailedPreconditionError(WardenError):
    """The request is well-formed but not allowed in the current state."""

    kind = ErrorKind.FAILED_PRECONDITION


class IdentityNotFoundError(WardenError):
    """The identity store has no record for the given id or email."""

    kind = ErrorKind.NOT_FOUND


class InternalError(WardenError):
    """Unexpected failure from a backing store."""

    kind = ErrorKind.INTERNAL


def as_warden_error(exc: BaseException) -> WardenError:
    """
    Coerce any exception into a WardenError.

    WardenErrors pass through unchanged; everything else becomes an
    ``internal`` error carrying the original message.
    """
    if isinstance(exc, WardenError):
        return exc
    return InternalError(str(exc) or type(exc).__name__)
