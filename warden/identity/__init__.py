"""
Warden identity module.

Identity records live in Supabase Auth.
"""

from .models import Identity
from .store import IdentityStore, SupabaseIdentityStore

__all__ = [
    "Identity",
    "IdentityStore",
    "SupabaseIdentityStore",
]
