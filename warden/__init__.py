"""
Warden - invite-only user administration on Supabase.

Admins invite users (identity + credential-setup link + profile and invite
rows) and delete them again. Everything else about the application stays
in your code.

Example:
    ```python
    from warden import Caller, Warden

    async with await Warden.create() as warden:
        invited = await warden.users.invite(
            Caller(uid=admin_uid),
            {"email": "jane@example.com", "firstName": "Jane", "lastName": "Doe"},
        )
        # Deliver invited.reset_link to the invitee yourself

        await warden.users.delete(
            Caller(uid=admin_uid),
            {"uid": invited.uid, "email": invited.email},
        )
    ```
"""

from .admin import (
    Caller,
    DeleteUserRequest,
    DeleteUserResponse,
    InviteUserRequest,
    InviteUserResponse,
    UserAdmin,
)
from .client import Warden
from .config import WardenConfig, load_config
from .errors import (
    ErrorKind,
    FailedPreconditionError,
    IdentityNotFoundError,
    InternalError,
    InvalidArgumentError,
    PermissionDeniedError,
    UnauthenticatedError,
    WardenError,
)
from .identity import Identity, IdentityStore
from .profiles import InviteRecord, ProfileStore, UserProfile

__version__ = "0.1.0"

__all__ = [
    # Main client
    "Warden",
    "WardenConfig",
    "load_config",
    # Operations
    "UserAdmin",
    "Caller",
    "InviteUserRequest",
    "InviteUserResponse",
    "DeleteUserRequest",
    "DeleteUserResponse",
    # Stores
    "Identity",
    "IdentityStore",
    "InviteRecord",
    "ProfileStore",
    "UserProfile",
    # Errors
    "ErrorKind",
    "WardenError",
    "UnauthenticatedError",
    "PermissionDeniedError",
    "InvalidArgumentError",
    "FailedPreconditionError",
    "IdentityNotFoundError",
    "InternalError",
]
