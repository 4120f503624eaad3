"""
User administration for Warden.

The two state-changing operations of an invite-only application:

* ``invite``: create or reuse an identity, mint a credential-setup link and
  write the profile and invite rows.
* ``delete``: remove the identity (best effort) and both rows.

Neither operation is transactional across the identity store and the
profile store. A failure after the identity exists leaves it in place; a
retried invite finds it by email and completes the rows.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Mapping, Optional, Union

from ..errors import (
    FailedPreconditionError,
    IdentityNotFoundError,
    InvalidArgumentError,
    UnauthenticatedError,
)
from ..identity.store import IdentityStore
from ..profiles.models import InviteRecord, ProfileStatus, UserProfile
from ..profiles.store import ProfileStore
from .guard import assert_admin
from .models import (
    Caller,
    DeleteUserRequest,
    DeleteUserResponse,
    InviteUserRequest,
    InviteUserResponse,
)

logger = logging.getLogger(__name__)


def normalize_email(email: Optional[str]) -> str:
    """Lowercase and trim; None becomes the empty string."""
    return (email or "").lower().strip()


def normalize_name(name: Optional[str]) -> str:
    return (name or "").strip()


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class UserAdmin:
    """
    Admin-gated invite and delete operations.

    Both stores are injected, so the same logic runs against Supabase or
    in-memory fakes.

    Example:
        ```python
        admin = UserAdmin(identities, profiles)

        invited = await admin.invite(
            Caller(uid=admin_uid),
            InviteUserRequest(email="jane@example.com", first_name="Jane", last_name="Doe"),
        )
        print(invited.reset_link)

        await admin.delete(Caller(uid=admin_uid), DeleteUserRequest(uid=invited.uid))
        ```
    """

    def __init__(
        self,
        identities: IdentityStore,
        profiles: ProfileStore,
        admin_role: str = "admin",
        default_role: str = "associate",
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """
        Initialize UserAdmin.

        Args:
            identities: Identity store (auth records and setup links)
            profiles: Profile store (profile and invite rows)
            admin_role: Role the caller's profile must carry
            default_role: Role given when the request names none
            clock: Source of the invited_at/updated_at timestamps
        """
        self.identities = identities
        self.profiles = profiles
        self.admin_role = admin_role
        self.default_role = default_role
        self.clock = clock

    async def invite(
        self,
        caller: Optional[Caller],
        request: Union[InviteUserRequest, Mapping[str, Any]],
    ) -> InviteUserResponse:
        """
        Invite a user, or re-invite an existing one.

        Args:
            caller: Authenticated caller, or None
            request: Email, optional role, first and last name

        Returns:
            InviteUserResponse with the identity id and setup link

        Raises:
            UnauthenticatedError: If there is no caller
            PermissionDeniedError: If the caller is not an admin
            InvalidArgumentError: If email or names are missing or malformed
        """
        if caller is None:
            raise UnauthenticatedError("You must be signed in.")
        await assert_admin(self.profiles, caller.uid, self.admin_role)

        if not isinstance(request, InviteUserRequest):
            request = InviteUserRequest.model_validate(request)

        email = normalize_email(request.email)
        role = (request.role or "").lower().strip() or self.default_role
        first_name = normalize_name(request.first_name)
        last_name = normalize_name(request.last_name)
        display_name = f"{first_name} {last_name}".strip()

        if not email or "@" not in email:
            raise InvalidArgumentError("Valid email is required.")
        if not first_name:
            raise InvalidArgumentError("First name is required.")
        if not last_name:
            raise InvalidArgumentError("Last name is required.")

        identity = await self.identities.find_by_email(email)
        if identity is None:
            identity = await self.identities.create(email, display_name or None)

        reset_link = await self.identities.generate_setup_link(email)

        now = self.clock()
        profile = UserProfile(
            uid=identity.uid,
            email=email,
            first_name=first_name,
            last_name=last_name,
            display_name=display_name,
            role=role,
            status=ProfileStatus.INVITED,
            invited_at=now,
            invited_by=caller.uid,
            updated_at=now,
        )
        # Two separate writes; a failure between them is healed by re-inviting.
        await self.profiles.upsert_profile(profile)
        await self.profiles.upsert_invite(InviteRecord.from_profile(profile))

        logger.info("invited %s as %s (uid=%s, by=%s)", email, role, identity.uid, caller.uid)

        return InviteUserResponse(
            uid=identity.uid,
            email=email,
            role=role,
            reset_link=reset_link,
        )

    async def delete(
        self,
        caller: Optional[Caller],
        request: Union[DeleteUserRequest, Mapping[str, Any]],
    ) -> DeleteUserResponse:
        """
        Delete a user's identity, profile row and (if email given) invite row.

        Deleting a user that is already gone succeeds.

        Args:
            caller: Authenticated caller, or None
            request: Target uid and optional email

        Returns:
            DeleteUserResponse echoing the uid and normalized email

        Raises:
            UnauthenticatedError: If there is no caller
            PermissionDeniedError: If the caller is not an admin
            InvalidArgumentError: If uid is missing
            FailedPreconditionError: If the caller targets themselves
        """
        if caller is None:
            raise UnauthenticatedError("You must be signed in.")
        await assert_admin(self.profiles, caller.uid, self.admin_role)

        if not isinstance(request, DeleteUserRequest):
            request = DeleteUserRequest.model_validate(request)

        target_uid = (request.uid or "").strip()
        email = normalize_email(request.email)

        if not target_uid:
            raise InvalidArgumentError("uid is required.")
        if target_uid == caller.uid:
            raise FailedPreconditionError("You cannot delete yourself.")

        await self._delete_identity(target_uid)
        await self.profiles.delete_user_documents(target_uid, email or None)

        logger.info("deleted %s (by=%s)", target_uid, caller.uid)

        return DeleteUserResponse(uid=target_uid, email=email)

    async def _delete_identity(self, uid: str) -> None:
        """
        Remove the identity record without failing the delete.

        An identity that is already gone is success. Any other failure is
        reported and the rows are still removed.
        """
        try:
            await self.identities.delete(uid)
        except IdentityNotFoundError:
            logger.info("identity %s already absent", uid)
        except Exception:
            logger.warning("identity %s could not be deleted; removing rows anyway", uid, exc_info=True)
