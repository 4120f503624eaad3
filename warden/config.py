"""
Warden configuration management.

Loads configuration from environment variables or .env file.
"""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class WardenConfig(BaseSettings):
    """
    Warden configuration settings.

    Can be loaded from:
    1. Environment variables (WARDEN_SUPABASE_URL, WARDEN_SUPABASE_KEY, etc.)
    2. .env file in project root
    3. Direct instantiation with kwargs

    Example:
        ```python
        # From environment
        config = WardenConfig()

        # Direct instantiation
        config = WardenConfig(
            supabase_url="https://xxx.supabase.co",
            supabase_key="your-service-role-key"
        )
        ```
    """

    model_config = SettingsConfigDict(
        env_prefix="WARDEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Supabase connection
    supabase_url: str = Field(
        ...,
        description="Supabase project URL (e.g., https://xxx.supabase.co)",
    )

    supabase_key: str = Field(
        ...,
        description="Supabase service role key (admin auth API + table writes)",
    )

    # Database layout
    db_schema: str = Field(
        default="public",
        description="PostgreSQL schema where the profile and invite tables live",
        alias="schema",
    )

    profiles_table: str = Field(
        default="profiles",
        description="Table holding one profile row per identity id",
    )

    invites_table: str = Field(
        default="invites",
        description="Table holding one invite row per normalized email",
    )

    # Roles
    admin_role: str = Field(
        default="admin",
        description="Profile role allowed to invite and delete users",
    )

    default_role: str = Field(
        default="associate",
        description="Role given to invitees when the request names none",
    )

    # Setup links
    setup_redirect_url: Optional[str] = Field(
        default=None,
        description="Where the credential-setup link redirects after the password is set",
    )

    # Logging
    debug: bool = Field(
        default=False,
        description="Enable debug logging",
    )

    log_level: str = Field(
        default="INFO",
        description="Log level for the warden logger",
    )

    @field_validator("supabase_url")
    @classmethod
    def validate_supabase_url(cls, v: str) -> str:
        """Ensure Supabase URL is valid."""
        if not v.startswith("https://"):
            raise ValueError("supabase_url must start with https://")
        return v.rstrip("/")

    @field_validator("supabase_key")
    @classmethod
    def validate_supabase_key(cls, v: str) -> str:
        """Ensure Supabase key is not empty."""
        if not v or len(v) < 10:
            raise ValueError("supabase_key appears invalid (too short)")
        return v

    @field_validator("admin_role", "default_role")
    @classmethod
    def normalize_role(cls, v: str) -> str:
        """Roles are compared lowercase."""
        v = v.strip().lower()
        if not v:
            raise ValueError("role names must not be empty")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        v = v.strip().upper()
        if v not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"unknown log level: {v}")
        return v


def load_config(**kwargs) -> WardenConfig:
    """
    Load Warden configuration.

    Priority order:
    1. Keyword arguments
    2. Environment variables (WARDEN_*)
    3. .env file

    Args:
        **kwargs: Override configuration values

    Returns:
        WardenConfig instance

    Raises:
        ValidationError: If required fields are missing or invalid
    """
    return WardenConfig(**kwargs)
