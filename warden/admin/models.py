"""
Warden admin operation models.

Request and response shapes for the invite and delete operations. Wire
names are camelCase (``firstName``, ``resetLink``); Python code uses the
snake_case field names.

Requests are deliberately lenient: any scalar is accepted and stringified,
and nothing is required at parse time. Field rules are enforced by the
operations themselves, after the caller has been authorized.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _stringify(v: Any) -> Optional[str]:
    if v is None or isinstance(v, str):
        return v
    return str(v)


class Caller(BaseModel):
    """The already-authenticated actor invoking an operation."""

    uid: str
    email: Optional[str] = None


class InviteUserRequest(BaseModel):
    """Request to invite a user by email."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    email: Optional[str] = None
    role: Optional[str] = None
    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")

    @field_validator("email", "role", "first_name", "last_name", mode="before")
    @classmethod
    def coerce_to_str(cls, v: Any) -> Optional[str]:
        return _stringify(v)


class InviteUserResponse(BaseModel):
    """Successful invite."""

    model_config = ConfigDict(populate_by_name=True)

    ok: bool = True
    uid: str
    email: str
    role: str
    reset_link: str = Field(alias="resetLink")


class DeleteUserRequest(BaseModel):
    """Request to delete a user by id, optionally cleaning up the invite row."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    uid: Optional[str] = None
    email: Optional[str] = None

    @field_validator("uid", "email", mode="before")
    @classmethod
    def coerce_to_str(cls, v: Any) -> Optional[str]:
        return _stringify(v)


class DeleteUserResponse(BaseModel):
    """Successful delete."""

    ok: bool = True
    uid: str
    email: str = ""
