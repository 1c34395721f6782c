"""
Database client factory for Supabase.

Clients are built on demand and handed to repositories explicitly. Callers
own the lifetime of the client they create: the API builds one per request,
tests build one per test. Nothing here caches a client at module level.
"""

from typing import Optional
from supabase import Client, ClientOptions, create_client

from .config import Settings, get_settings


def create_supabase_client(settings: Optional[Settings] = None) -> Client:
    """
    Create a Supabase client with the service role (bypasses RLS).

    Authorization is enforced by the service layer, so every backend
    operation runs with the service role key. Each PostgREST call is bounded
    by ``store_timeout_seconds``.

    Args:
        settings: Settings to read connection details from. Defaults to the
            cached application settings.

    Returns:
        A new Supabase client.
    """
    settings = settings or get_settings()
    if not settings.supabase_url or not settings.supabase_service_role_key:
        raise RuntimeError(
            "Supabase configuration missing. "
            "Set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY environment variables."
        )

    return create_client(
        settings.supabase_url,
        settings.supabase_service_role_key,
        options=ClientOptions(
            postgrest_client_timeout=settings.store_timeout_seconds,
        ),
    )
