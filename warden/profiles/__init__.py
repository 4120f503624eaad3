"""
Warden profiles module.

Profile rows (by identity id) and invite rows (by email) live in Supabase
Postgres.
"""

from .models import InviteRecord, ProfileStatus, UserProfile, role_of
from .store import ProfileStore, SupabaseProfileStore

__all__ = [
    "InviteRecord",
    "ProfileStatus",
    "ProfileStore",
    "SupabaseProfileStore",
    "UserProfile",
    "role_of",
]
