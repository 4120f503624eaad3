"""
Tests for warden.identity module.
"""

import pytest
from unittest.mock import AsyncMock, Mock

from supabase_auth.errors import AuthApiError

from warden.errors import IdentityNotFoundError
from warden.identity.models import Identity
from warden.identity.store import LIST_PAGE_SIZE, SupabaseIdentityStore


def auth_user(email, uid="u-1", display_name=None):
    user = Mock()
    user.id = uid
    user.email = email
    user.user_metadata = {"display_name": display_name} if display_name else {}
    return user


class TestIdentity:
    """Tests for the Identity model."""

    def test_from_auth_user(self, sample_auth_user):
        """Test building an Identity from a Supabase user."""
        identity = Identity.from_auth_user(sample_auth_user)

        assert identity.uid == sample_auth_user.id
        assert identity.email == "jane@example.com"
        assert identity.display_name == "Jane Doe"

    def test_from_auth_user_without_metadata(self):
        """Test that missing user_metadata leaves display_name unset."""
        user = auth_user("jane@example.com")
        user.user_metadata = None

        identity = Identity.from_auth_user(user)

        assert identity.display_name is None


class TestSupabaseIdentityStore:
    """Tests for SupabaseIdentityStore class."""

    @pytest.mark.asyncio
    async def test_find_by_email(self, warden):
        """Test finding an identity on the first page."""
        admin = warden.client.auth.admin
        admin.list_users = AsyncMock(
            return_value=[auth_user("other@x.com", "u-0"), auth_user("jane@x.com", "u-1")]
        )

        identity = await warden.identities.find_by_email("jane@x.com")

        assert identity.uid == "u-1"
        admin.list_users.assert_awaited_once_with(page=1, per_page=LIST_PAGE_SIZE)

    @pytest.mark.asyncio
    async def test_find_by_email_pages(self, warden):
        """Test that lookup walks pages until a short page."""
        full_page = [auth_user(f"user{i}@x.com", f"u-{i}") for i in range(LIST_PAGE_SIZE)]
        warden.client.auth.admin.list_users = AsyncMock(
            side_effect=[full_page, [auth_user("jane@x.com", "u-jane")]]
        )

        identity = await warden.identities.find_by_email("jane@x.com")

        assert identity.uid == "u-jane"
        assert warden.client.auth.admin.list_users.await_count == 2

    @pytest.mark.asyncio
    async def test_find_by_email_not_found(self, warden):
        """Test that no match returns None."""
        warden.client.auth.admin.list_users = AsyncMock(return_value=[])

        assert await warden.identities.find_by_email("jane@x.com") is None

    @pytest.mark.asyncio
    async def test_find_by_email_not_found_error(self, warden):
        """Test that a 404 from Supabase means absent."""
        warden.client.auth.admin.list_users = AsyncMock(
            side_effect=AuthApiError("User not found", 404, "user_not_found")
        )

        assert await warden.identities.find_by_email("jane@x.com") is None

    @pytest.mark.asyncio
    async def test_find_by_email_other_error_propagates(self, warden):
        """Test that other auth errors are not read as absence."""
        warden.client.auth.admin.list_users = AsyncMock(
            side_effect=AuthApiError("Invalid API key", 401, "bad_jwt")
        )

        with pytest.raises(AuthApiError):
            await warden.identities.find_by_email("jane@x.com")

    @pytest.mark.asyncio
    async def test_create(self, warden):
        """Test creating an identity with a display name."""
        response = Mock()
        response.user = auth_user("jane@x.com", "u-new", "Jane Doe")
        warden.client.auth.admin.create_user = AsyncMock(return_value=response)

        identity = await warden.identities.create("jane@x.com", "Jane Doe")

        assert identity.uid == "u-new"
        warden.client.auth.admin.create_user.assert_awaited_once_with(
            {
                "email": "jane@x.com",
                "email_confirm": True,
                "user_metadata": {"display_name": "Jane Doe"},
            }
        )

    @pytest.mark.asyncio
    async def test_create_without_display_name(self, warden):
        """Test that no metadata is sent without a display name."""
        response = Mock()
        response.user = auth_user("jane@x.com", "u-new")
        warden.client.auth.admin.create_user = AsyncMock(return_value=response)

        await warden.identities.create("jane@x.com")

        attributes = warden.client.auth.admin.create_user.await_args.args[0]
        assert "user_metadata" not in attributes

    @pytest.mark.asyncio
    async def test_generate_setup_link(self, warden):
        """Test minting a recovery link with the configured redirect."""
        response = Mock()
        response.properties.action_link = "https://test.supabase.co/auth/v1/verify?token=abc"
        warden.client.auth.admin.generate_link = AsyncMock(return_value=response)

        link = await warden.identities.generate_setup_link("jane@x.com")

        assert link == "https://test.supabase.co/auth/v1/verify?token=abc"
        warden.client.auth.admin.generate_link.assert_awaited_once_with(
            {
                "type": "recovery",
                "email": "jane@x.com",
                "options": {"redirect_to": "https://app.example.com/set-password"},
            }
        )

    @pytest.mark.asyncio
    async def test_generate_setup_link_without_redirect(self, mock_warden_supabase_client):
        """Test that no options are sent without a redirect URL."""
        store = SupabaseIdentityStore(mock_warden_supabase_client)
        response = Mock()
        response.properties.action_link = "https://link"
        mock_warden_supabase_client.auth.admin.generate_link = AsyncMock(return_value=response)

        await store.generate_setup_link("jane@x.com")

        mock_warden_supabase_client.auth.admin.generate_link.assert_awaited_once_with(
            {"type": "recovery", "email": "jane@x.com"}
        )

    @pytest.mark.asyncio
    async def test_delete(self, warden):
        """Test hard-deleting an identity."""
        warden.client.auth.admin.delete_user = AsyncMock(return_value=None)

        await warden.identities.delete("u-1")

        warden.client.auth.admin.delete_user.assert_awaited_once_with(
            "u-1", should_soft_delete=False
        )

    @pytest.mark.asyncio
    async def test_delete_not_found(self, warden):
        """Test that a missing user becomes IdentityNotFoundError."""
        warden.client.auth.admin.delete_user = AsyncMock(
            side_effect=AuthApiError("User not found", 404, "user_not_found")
        )

        with pytest.raises(IdentityNotFoundError):
            await warden.identities.delete("u-1")

    @pytest.mark.asyncio
    async def test_delete_other_error_propagates(self, warden):
        """Test that other auth errors pass through unchanged."""
        warden.client.auth.admin.delete_user = AsyncMock(
            side_effect=AuthApiError("Internal error", 500, "unexpected_failure")
        )

        with pytest.raises(AuthApiError):
            await warden.identities.delete("u-1")
