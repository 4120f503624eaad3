"""
Pytest configuration and fixtures for Warden tests.

Provides a mock Supabase client for the store adapters and in-memory
identity/profile stores for the operations.
"""

import secrets
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from unittest.mock import AsyncMock, Mock
from uuid import uuid4

import pytest

from warden.admin import Caller, UserAdmin
from warden.client import Warden
from warden.config import WardenConfig
from warden.errors import IdentityNotFoundError
from warden.identity.models import Identity
from warden.profiles.models import InviteRecord, UserProfile
from warden.utils.supabase import WardenSupabaseClient

FIXED_NOW = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


class FakeIdentityStore:
    """In-memory IdentityStore."""

    def __init__(self) -> None:
        self.identities: Dict[str, Identity] = {}
        self.links: List[str] = []
        self.writes = 0
        self.lookup_error: Optional[Exception] = None
        self.delete_error: Optional[Exception] = None

    def add(self, email: str, display_name: Optional[str] = None) -> Identity:
        identity = Identity(uid=str(uuid4()), email=email, display_name=display_name)
        self.identities[identity.uid] = identity
        return identity

    async def find_by_email(self, email: str) -> Optional[Identity]:
        if self.lookup_error:
            raise self.lookup_error
        for identity in self.identities.values():
            if identity.email == email:
                return identity
        return None

    async def create(self, email: str, display_name: Optional[str] = None) -> Identity:
        self.writes += 1
        return self.add(email, display_name)

    async def generate_setup_link(self, email: str) -> str:
        link = f"https://auth.example.com/verify?type=recovery&token={secrets.token_urlsafe(16)}"
        self.links.append(link)
        return link

    async def delete(self, uid: str) -> None:
        if self.delete_error:
            raise self.delete_error
        if uid not in self.identities:
            raise IdentityNotFoundError(f"Identity {uid} not found")
        self.writes += 1
        del self.identities[uid]


class FakeProfileStore:
    """In-memory ProfileStore with merge-on-upsert."""

    def __init__(self) -> None:
        self.profiles: Dict[str, Dict[str, Any]] = {}
        self.invites: Dict[str, Dict[str, Any]] = {}
        self.reads = 0
        self.writes = 0
        self.upsert_profile_error: Optional[Exception] = None

    async def get_profile(self, uid: str) -> Optional[Dict[str, Any]]:
        self.reads += 1
        return self.profiles.get(uid)

    async def upsert_profile(self, profile: UserProfile) -> None:
        if self.upsert_profile_error:
            raise self.upsert_profile_error
        self.writes += 1
        self.profiles.setdefault(profile.uid, {}).update(profile.to_row())

    async def upsert_invite(self, invite: InviteRecord) -> None:
        self.writes += 1
        self.invites.setdefault(invite.email, {}).update(invite.to_row())

    async def delete_user_documents(self, uid: str, email: Optional[str] = None) -> None:
        self.writes += 1
        self.profiles.pop(uid, None)
        if email:
            self.invites.pop(email, None)


@pytest.fixture
def mock_supabase_client():
    """Create a mock Supabase client."""
    client = AsyncMock()

    # Mock auth client
    auth_client = AsyncMock()
    auth_admin = AsyncMock()
    auth_client.admin = auth_admin
    client.auth = auth_client

    # Store query builders by table name so we can configure them
    query_builders = {}

    def table_mock(table_name: str):
        if table_name not in query_builders:
            query_builder = Mock()
            # Make all methods return self for chaining
            query_builder.select = Mock(return_value=query_builder)
            query_builder.upsert = Mock(return_value=query_builder)
            query_builder.delete = Mock(return_value=query_builder)
            query_builder.eq = Mock(return_value=query_builder)
            # Default execute returns empty result
            query_builder.execute = AsyncMock(return_value=Mock(data=[], count=0))
            query_builders[table_name] = query_builder
        return query_builders[table_name]

    client.table = Mock(side_effect=table_mock)

    rpc_builder = Mock()
    rpc_builder.execute = AsyncMock(return_value=Mock(data=None))
    client.rpc = Mock(return_value=rpc_builder)

    # client.schema(name) returns a PostgREST client for another schema
    schema_client = Mock()
    schema_client.rpc = Mock(return_value=rpc_builder)
    client.schema = Mock(return_value=schema_client)

    client._query_builders = query_builders  # Expose for test configuration

    return client


@pytest.fixture
def warden_config():
    """Create a test WardenConfig."""
    return WardenConfig(
        supabase_url="https://test.supabase.co",
        supabase_key="test-service-key-12345678901234567890",
        setup_redirect_url="https://app.example.com/set-password",
    )


@pytest.fixture
def mock_warden_supabase_client(mock_supabase_client, warden_config):
    """Create a WardenSupabaseClient around the mock client."""
    return WardenSupabaseClient(config=warden_config, client=mock_supabase_client)


@pytest.fixture
def warden(mock_warden_supabase_client, warden_config):
    """Create a test Warden instance."""
    return Warden(config=warden_config, client=mock_warden_supabase_client)


@pytest.fixture
def identities():
    return FakeIdentityStore()


@pytest.fixture
def profiles():
    return FakeProfileStore()


@pytest.fixture
def admin_caller(identities, profiles):
    """An admin with an identity and an admin profile row."""
    identity = identities.add("admin@example.com", "Ada Admin")
    profiles.profiles[identity.uid] = {
        "uid": identity.uid,
        "email": identity.email,
        "role": "admin",
        "status": "active",
    }
    return Caller(uid=identity.uid, email=identity.email)


@pytest.fixture
def associate_caller(identities, profiles):
    """A signed-in user whose profile role is not admin."""
    identity = identities.add("sam@example.com", "Sam Staff")
    profiles.profiles[identity.uid] = {
        "uid": identity.uid,
        "email": identity.email,
        "role": "associate",
    }
    return Caller(uid=identity.uid, email=identity.email)


@pytest.fixture
def fixed_now():
    return FIXED_NOW


@pytest.fixture
def user_admin(identities, profiles):
    """UserAdmin over the in-memory stores with a fixed clock."""
    return UserAdmin(identities, profiles, clock=lambda: FIXED_NOW)


@pytest.fixture
def sample_auth_user():
    """A supabase_auth User-like object."""
    user = Mock()
    user.id = str(uuid4())
    user.email = "jane@example.com"
    user.user_metadata = {"display_name": "Jane Doe"}
    return user
