"""
Supabase client wrapper for Warden.

Provides a thin wrapper around the Supabase AsyncClient configured with the
service role key, which both the identity store (auth admin API) and the
profile store (PostgREST tables and RPC) need.

Source references:
- supabase._async.client.AsyncClient
- supabase_auth._async.gotrue_admin_api.AsyncGoTrueAdminAPI
"""

from typing import Optional

from supabase import AsyncClient, acreate_client
from supabase.lib.client_options import AsyncClientOptions
from supabase_auth import AsyncMemoryStorage

from ..config import WardenConfig


class WardenSupabaseClient:
    """
    Wrapper around Supabase AsyncClient with Warden-specific configuration.

    Example:
        ```python
        config = WardenConfig()
        client = await WardenSupabaseClient.create(config)

        # Auth admin API
        users = await client.auth.admin.list_users()

        # Tables
        result = await client.table("profiles").select("*").execute()
        ```
    """

    def __init__(self, config: WardenConfig, client: AsyncClient) -> None:
        """
        Initialize the Warden Supabase client.

        Args:
            config: Warden configuration
            client: Initialized Supabase AsyncClient

        Note:
            Use WardenSupabaseClient.create() instead of direct instantiation.
        """
        self.config = config
        self._client = client

    @classmethod
    async def create(cls, config: WardenConfig) -> "WardenSupabaseClient":
        """
        Create and initialize a WardenSupabaseClient.

        Args:
            config: Warden configuration with Supabase credentials

        Returns:
            Initialized WardenSupabaseClient
        """
        options = AsyncClientOptions(
            schema=config.db_schema,
            storage=AsyncMemoryStorage(),
            auto_refresh_token=False,
            persist_session=False,
        )

        client = await acreate_client(
            supabase_url=config.supabase_url,
            supabase_key=config.supabase_key,
            options=options,
        )

        return cls(config=config, client=client)

    @property
    def auth(self):
        """
        Access Supabase Auth client.

        ``auth.admin`` carries the service-role operations (create_user,
        delete_user, generate_link, list_users); ``auth.get_user(jwt)``
        resolves a caller from an access token.
        """
        return self._client.auth

    def table(self, table_name: str):
        """
        Create a query builder for a specific table.

        Args:
            table_name: Name of the table (e.g., "profiles")

        Returns:
            AsyncRequestBuilder for chaining queries
        """
        return self._client.table(table_name)

    def rpc(self, fn: str, params: dict, schema: Optional[str] = None):
        """
        Call a Postgres function through PostgREST.

        Args:
            fn: Function name
            params: Named arguments
            schema: Schema the function lives in, when it is not the
                configured ``db_schema``

        Returns:
            Request builder; call ``execute()`` on it
        """
        if schema and schema != self.config.db_schema:
            return self._client.schema(schema).rpc(fn, params)
        return self._client.rpc(fn, params)

    async def close(self) -> None:
        """Close the client and cleanup resources."""
        # supabase 2.x AsyncClient has no explicit close
        pass


async def create_supabase_client(config: WardenConfig) -> WardenSupabaseClient:
    """
    Convenience function to create a WardenSupabaseClient.

    Args:
        config: Warden configuration

    Returns:
        Initialized WardenSupabaseClient
    """
    return await WardenSupabaseClient.create(config)
