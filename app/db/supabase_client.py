from __future__ import annotations

from functools import lru_cache

from supabase import Client, create_client

from app.core.errors import ConfigError


@lru_cache(maxsize=None)
def get_supabase_client(url: str | None, service_key: str | None) -> Client:
    """
    One client per (url, key) for the whole process.
    """
    if not url or not service_key:
        raise ConfigError("SUPABASE_URL or SUPABASE_SERVICE_KEY not set")

    return create_client(url, service_key)
