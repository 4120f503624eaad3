"""
Warden identity models.

An identity is the authentication record owned by Supabase Auth.
"""

from typing import Any, Optional

from pydantic import BaseModel


class Identity(BaseModel):
    """
    Identity record as seen by Warden.

    The id is assigned by the identity store and never changes. Email is
    compared exactly as stored; Warden always normalizes before lookup.
    """

    uid: str
    email: str
    display_name: Optional[str] = None

    model_config = {
        "from_attributes": True,
        "json_schema_extra": {
            "example": {
                "uid": "123e4567-e89b-12d3-a456-426614174000",
                "email": "jane@example.com",
                "display_name": "Jane Doe",
            }
        },
    }

    @classmethod
    def from_auth_user(cls, user: Any) -> "Identity":
        """Build from a ``supabase_auth.types.User``."""
        metadata = getattr(user, "user_metadata", None) or {}
        return cls(
            uid=str(user.id),
            email=user.email or "",
            display_name=metadata.get("display_name"),
        )
