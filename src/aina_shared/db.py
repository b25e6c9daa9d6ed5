"""
db.py — Supabase clients, one per key role per process.

The API only reads. Lookups against api_keys and aina need the service key;
the sensor tables are reached with the anon key through the
`aina_metrics` function. Clients are created lazily on first use.

Usage:
    from aina_shared.db import get_supabase_client

    supabase = get_supabase_client()                    # anon key
    supabase = get_supabase_client(service_role=True)   # service key
"""

from __future__ import annotations

import threading

import structlog
from supabase import Client, create_client

from aina_shared.config import settings

logger = structlog.get_logger(__name__)

_lock = threading.Lock()
_clients: dict[str, Client] = {}


def _key_for(role: str) -> str:
    key = settings.supabase_service_key if role == "service_role" else settings.supabase_anon_key
    if not key:
        env_name = "SUPABASE_SERVICE_KEY" if role == "service_role" else "SUPABASE_ANON_KEY"
        raise RuntimeError(f"{env_name} is not set; add it to .env")
    return key


def get_supabase_client(*, service_role: bool = False) -> Client:
    """
    Return the process-wide Supabase client for the requested role.

    Raises:
        RuntimeError: the key for that role is not configured.
    """
    role = "service_role" if service_role else "anon"
    with _lock:
        client = _clients.get(role)
        if client is None:
            client = create_client(settings.supabase_url, _key_for(role))
            _clients[role] = client
            logger.info("supabase_client_created", role=role, url=settings.supabase_url)
        return client


def reset_supabase_clients() -> None:
    """Drop cached clients so the next call rebuilds them from settings."""
    with _lock:
        _clients.clear()
