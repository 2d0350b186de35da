"""
Database client factory for Supabase.

The auth schema (user, session, organization, member, invitation, ...) is
owned by the external auth backend. This service only reads it, using the
service-role client.
"""

from typing import Optional
from supabase import create_client, Client

from .config import Settings, get_settings

# One client per (url, service role key)
_service_clients: dict[tuple[str, str], Client] = {}


def get_supabase_client(settings: Optional[Settings] = None) -> Client:
    """
    Get Supabase client with service role (bypasses RLS).

    Clients are cached per URL and key, so settings pointing at another
    project get their own client.

    Args:
        settings: Settings to read the connection info from.
            Defaults to the cached application settings.

    Returns:
        Supabase client configured with service role key
    """
    settings = settings or get_settings()
    if not settings.supabase_url or not settings.supabase_service_role_key:
        raise RuntimeError(
            "Supabase configuration missing. "
            "Set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY environment variables."
        )

    key = (settings.supabase_url, settings.supabase_service_role_key)
    if key not in _service_clients:
        _service_clients[key] = create_client(*key)
    return _service_clients[key]


def reset_client_cache() -> None:
    """
    Reset the cached database clients.

    Useful for testing or when configuration changes.
    """
    _service_clients.clear()
