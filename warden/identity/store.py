"""
Identity store for Warden.

Defines the capability the operations need from the identity provider and
implements it on the Supabase Auth admin API.

Wraps: supabase_auth._async.gotrue_admin_api.AsyncGoTrueAdminAPI
"""

import logging
from typing import TYPE_CHECKING, Optional, Protocol

from supabase_auth.errors import AuthApiError
from supabase_auth.types import AdminUserAttributes

from ..errors import IdentityNotFoundError
from .models import Identity

if TYPE_CHECKING:
    from ..utils.supabase import WardenSupabaseClient

logger = logging.getLogger(__name__)

LIST_PAGE_SIZE = 1000


class IdentityStore(Protocol):
    """What the invite and delete operations need from the identity provider."""

    async def find_by_email(self, email: str) -> Optional[Identity]:
        """Return the identity for ``email``, or None if the store has none."""
        ...

    async def create(self, email: str, display_name: Optional[str] = None) -> Identity:
        """Create a new identity."""
        ...

    async def generate_setup_link(self, email: str) -> str:
        """Mint a one-time credential-setup link for ``email``."""
        ...

    async def delete(self, uid: str) -> None:
        """Delete an identity; raises IdentityNotFoundError if absent."""
        ...


def is_not_found(error: AuthApiError) -> bool:
    """True when Supabase Auth reports a missing user."""
    return error.status == 404 or getattr(error, "code", None) == "user_not_found"


class SupabaseIdentityStore:
    """
    IdentityStore backed by Supabase Auth.

    Only a "not found" answer from Supabase is translated; every other
    AuthApiError (rate limits, bad key, network) propagates unchanged.
    """

    def __init__(
        self,
        client: "WardenSupabaseClient",
        redirect_to: Optional[str] = None,
    ) -> None:
        """
        Initialize SupabaseIdentityStore.

        Args:
            client: Warden Supabase client (service role)
            redirect_to: Optional redirect URL embedded in setup links
        """
        self.client = client
        self.redirect_to = redirect_to

    async def find_by_email(self, email: str) -> Optional[Identity]:
        """
        Look up an identity by email.

        The admin API has no get-by-email call, so users are paged through
        until a match or the last page.

        Wraps: AsyncGoTrueAdminAPI.list_users
        """
        page = 1
        while True:
            try:
                users = await self.client.auth.admin.list_users(
                    page=page, per_page=LIST_PAGE_SIZE
                )
            except AuthApiError as e:
                if is_not_found(e):
                    return None
                raise

            for user in users:
                if user.email == email:
                    return Identity.from_auth_user(user)

            if len(users) < LIST_PAGE_SIZE:
                return None
            page += 1

    async def create(self, email: str, display_name: Optional[str] = None) -> Identity:
        """
        Create an identity with no password.

        The invitee sets a password through the setup link, so the email is
        marked confirmed up front.

        Wraps: AsyncGoTrueAdminAPI.create_user
        """
        attributes: AdminUserAttributes = {
            "email": email,
            "email_confirm": True,
        }
        if display_name:
            attributes["user_metadata"] = {"display_name": display_name}

        response = await self.client.auth.admin.create_user(attributes)
        identity = Identity.from_auth_user(response.user)
        logger.info("created identity %s", identity.uid)
        return identity

    async def generate_setup_link(self, email: str) -> str:
        """
        Generate a recovery link the invitee uses to set a password.

        Wraps: AsyncGoTrueAdminAPI.generate_link
        """
        params = {"type": "recovery", "email": email}
        if self.redirect_to:
            params["options"] = {"redirect_to": self.redirect_to}

        response = await self.client.auth.admin.generate_link(params)
        return response.properties.action_link

    async def delete(self, uid: str) -> None:
        """
        Permanently delete an identity.

        Wraps: AsyncGoTrueAdminAPI.delete_user

        Raises:
            IdentityNotFoundError: If Supabase has no such user
        """
        try:
            await self.client.auth.admin.delete_user(uid, should_soft_delete=False)
        except AuthApiError as e:
            if is_not_found(e):
                raise IdentityNotFoundError(f"Identity {uid} not found") from e
            raise
