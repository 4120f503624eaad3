"""
Profile store for Warden.

Defines the capability the operations need from the document store and
implements it on Supabase Postgres through PostgREST.
"""

import logging
from typing import TYPE_CHECKING, Any, Dict, Optional, Protocol

from .models import InviteRecord, UserProfile

if TYPE_CHECKING:
    from ..utils.supabase import WardenSupabaseClient

logger = logging.getLogger(__name__)

DELETE_DOCUMENTS_FN = "warden_delete_user_documents"
DELETE_DOCUMENTS_FN_SCHEMA = "public"


class ProfileStore(Protocol):
    """What the invite and delete operations need from the profile store."""

    async def get_profile(self, uid: str) -> Optional[Dict[str, Any]]:
        """Return the stored profile row for ``uid``, or None."""
        ...

    async def upsert_profile(self, profile: UserProfile) -> None:
        """Merge-write the profile row keyed by uid."""
        ...

    async def upsert_invite(self, invite: InviteRecord) -> None:
        """Merge-write the invite row keyed by email."""
        ...

    async def delete_user_documents(self, uid: str, email: Optional[str] = None) -> None:
        """Atomically delete the profile row and, if given, the invite row."""
        ...


class SupabaseProfileStore:
    """
    ProfileStore backed by two PostgREST tables.

    Upserts use PostgREST's merge-duplicates resolution, which only touches
    the columns present in the payload, so columns Warden does not own
    survive a re-invite. The paired delete goes through a Postgres function
    so both rows are removed in one transaction. The function lives in
    ``public`` and is told which schema and tables to delete from.
    """

    def __init__(
        self,
        client: "WardenSupabaseClient",
        profiles_table: str = "profiles",
        invites_table: str = "invites",
        schema: str = "public",
    ) -> None:
        """
        Initialize SupabaseProfileStore.

        Args:
            client: Warden Supabase client (service role)
            profiles_table: Table keyed by ``uid``
            invites_table: Table keyed by ``email``
            schema: Schema holding both tables
        """
        self.client = client
        self.profiles_table = profiles_table
        self.invites_table = invites_table
        self.schema = schema

    async def get_profile(self, uid: str) -> Optional[Dict[str, Any]]:
        result = await self.client.table(self.profiles_table).select("*").eq(
            "uid", uid
        ).execute()

        if not result.data:
            return None

        return result.data[0]

    async def upsert_profile(self, profile: UserProfile) -> None:
        await self.client.table(self.profiles_table).upsert(
            profile.to_row(), on_conflict="uid"
        ).execute()

    async def upsert_invite(self, invite: InviteRecord) -> None:
        await self.client.table(self.invites_table).upsert(
            invite.to_row(), on_conflict="email"
        ).execute()

    async def delete_user_documents(self, uid: str, email: Optional[str] = None) -> None:
        """
        Delete the profile row and, when ``email`` is given, the invite row.

        Missing rows are not an error. Either both deletes commit or
        neither does.
        """
        await self.client.rpc(
            DELETE_DOCUMENTS_FN,
            {
                "p_uid": uid,
                "p_email": email or None,
                "p_schema": self.schema,
                "p_profiles_table": self.profiles_table,
                "p_invites_table": self.invites_table,
            },
            schema=DELETE_DOCUMENTS_FN_SCHEMA,
        ).execute()
        logger.debug("deleted documents for %s (invite email: %s)", uid, email or "-")
