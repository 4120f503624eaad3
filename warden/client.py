"""
Main Warden client.

This is the primary interface users interact with.
"""

from typing import Optional

from .admin import UserAdmin
from .config import WardenConfig, load_config
from .identity import SupabaseIdentityStore
from .profiles import SupabaseProfileStore
from .utils.supabase import WardenSupabaseClient


class Warden:
    """
    Main Warden client.

    Wires the Supabase-backed identity and profile stores into the user
    admin operations.

    Example:
        ```python
        from warden import Caller, Warden

        # Initialize from environment variables
        warden = await Warden.create()

        # Or with explicit config
        warden = await Warden.create(
            supabase_url="https://xxx.supabase.co",
            supabase_key="your-service-key"
        )

        invited = await warden.users.invite(
            Caller(uid=admin_uid),
            {"email": "jane@example.com", "firstName": "Jane", "lastName": "Doe"},
        )
        ```
    """

    def __init__(self, config: WardenConfig, client: WardenSupabaseClient) -> None:
        """
        Initialize Warden client.

        Args:
            config: Warden configuration
            client: Supabase client wrapper

        Note:
            Use Warden.create() instead of direct instantiation.
        """
        self.config = config
        self.client = client

        self.identities = SupabaseIdentityStore(
            client, redirect_to=config.setup_redirect_url
        )
        self.profiles = SupabaseProfileStore(
            client,
            profiles_table=config.profiles_table,
            invites_table=config.invites_table,
            schema=config.db_schema,
        )
        self.users = UserAdmin(
            self.identities,
            self.profiles,
            admin_role=config.admin_role,
            default_role=config.default_role,
        )

    @classmethod
    async def create(
        cls,
        supabase_url: Optional[str] = None,
        supabase_key: Optional[str] = None,
        config: Optional[WardenConfig] = None,
        **kwargs,
    ) -> "Warden":
        """
        Create and initialize a Warden client.

        Args:
            supabase_url: Supabase project URL (optional, loads from env)
            supabase_key: Supabase service role key (optional, loads from env)
            config: Already loaded configuration; the other arguments are
                ignored when given
            **kwargs: Additional configuration options

        Returns:
            Initialized Warden client

        Raises:
            ValidationError: If required configuration is missing or invalid
        """
        if config is None:
            config_kwargs = kwargs.copy()
            if supabase_url:
                config_kwargs["supabase_url"] = supabase_url
            if supabase_key:
                config_kwargs["supabase_key"] = supabase_key

            config = load_config(**config_kwargs)

        client = await WardenSupabaseClient.create(config)

        return cls(config=config, client=client)

    async def close(self) -> None:
        """Close the Warden client and cleanup resources."""
        await self.client.close()

    async def __aenter__(self) -> "Warden":
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
