"""
Warden admin module.

Admin-gated invite and delete operations.
"""

from .guard import assert_admin
from .models import (
    Caller,
    DeleteUserRequest,
    DeleteUserResponse,
    InviteUserRequest,
    InviteUserResponse,
)
from .users import UserAdmin, normalize_email

__all__ = [
    "UserAdmin",
    "assert_admin",
    "normalize_email",
    "Caller",
    "InviteUserRequest",
    "InviteUserResponse",
    "DeleteUserRequest",
    "DeleteUserResponse",
]
