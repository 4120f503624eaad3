"""
Warden framework integrations.

Provides adapters for exposing the admin operations over HTTP.
"""

# FastAPI adapter is imported conditionally to avoid requiring fastapi
# as a hard dependency

__all__ = []

try:
    from .fastapi import create_router, supabase_caller_resolver

    __all__.extend(["create_router", "supabase_caller_resolver"])
except ImportError:
    pass
