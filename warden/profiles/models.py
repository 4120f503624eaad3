"""
Warden profile models.

Pydantic models for the two denormalized rows written on invite: the user
profile keyed by identity id and the invite record keyed by email.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel


class ProfileStatus(str, Enum):
    """Lifecycle status of a user profile."""

    INVITED = "invited"


class _InvitedUserFields(BaseModel):
    """Fields shared by the profile row and the invite row."""

    uid: str
    email: str
    first_name: str
    last_name: str
    display_name: str
    role: str
    status: ProfileStatus = ProfileStatus.INVITED
    invited_at: datetime
    invited_by: str
    updated_at: datetime

    def to_row(self) -> Dict[str, Any]:
        """Render as a JSON-safe dict for PostgREST."""
        return self.model_dump(mode="json")


class UserProfile(_InvitedUserFields):
    """
    User profile row, one per identity id.

    The caller's own profile is what the admin check reads, so ``role`` here
    is the source of truth for authorization.
    """

    model_config = {
        "from_attributes": True,
        "json_schema_extra": {
            "example": {
                "uid": "123e4567-e89b-12d3-a456-426614174000",
                "email": "jane@example.com",
                "first_name": "Jane",
                "last_name": "Doe",
                "display_name": "Jane Doe",
                "role": "associate",
                "status": "invited",
                "invited_at": "2024-01-01T00:00:00Z",
                "invited_by": "012e3456-e89b-12d3-a456-426614174000",
                "updated_at": "2024-01-01T00:00:00Z",
            }
        },
    }


class InviteRecord(_InvitedUserFields):
    """
    Invite row, one per normalized email.

    Mirrors the profile so outstanding invites can be found by email alone.
    """

    @classmethod
    def from_profile(cls, profile: UserProfile) -> "InviteRecord":
        return cls(**profile.model_dump())


def role_of(row: Optional[Dict[str, Any]]) -> str:
    """Lowercased role of a stored profile row; empty when missing."""
    if not row:
        return ""
    return str(row.get("role") or "").lower()
