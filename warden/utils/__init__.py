"""Warden utilities."""

from .supabase import WardenSupabaseClient, create_supabase_client

__all__ = ["WardenSupabaseClient", "create_supabase_client"]
