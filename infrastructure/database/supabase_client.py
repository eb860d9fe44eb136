"""
Supabase client initialization.
Single point of database connection.
"""

from supabase import create_client, Client, ClientOptions
import asyncio
import concurrent.futures
import logging
import threading
from functools import wraps
from typing import Optional

from config.settings import Settings, settings as default_settings

logger = logging.getLogger(__name__)

_clients: dict = {}
_clients_lock = threading.Lock()


def create_supabase_client(settings: Settings, service_role: bool = False) -> Client:
    """
    Build a client from explicit settings.
    The anon key respects row-level security; the service key bypasses it and
    is only for trusted server-side jobs.
    """
    if service_role:
        url, key = settings.require("supabase_url", "supabase_service_key")
    else:
        url, key = settings.require("supabase_url", "supabase_anon_key")

    # Schema isolation: staging uses its own schema, production uses public
    if settings.db_schema != "public":
        logger.info(f"[SUPABASE] Using schema '{settings.db_schema}'")
        return create_client(url, key, options=ClientOptions(schema=settings.db_schema))
    return create_client(url, key)


def _get_cached(service_role: bool, settings: Optional[Settings]) -> Client:
    with _clients_lock:
        client = _clients.get(service_role)
        if client is None:
            client = create_supabase_client(settings or default_settings, service_role=service_role)
            _clients[service_role] = client
        return client


def get_supabase_client(settings: Optional[Settings] = None) -> Client:
    """Process-wide anon client, created on first use"""
    return _get_cached(False, settings)


def get_service_client(settings: Optional[Settings] = None) -> Client:
    """Process-wide service-role client, created on first use"""
    return _get_cached(True, settings)


def reset_clients():
    """Drop cached clients (tests, settings reload)"""
    with _clients_lock:
        _clients.clear()


# Dedicated bounded thread pool for DB operations — prevents exhausting the
# default executor when many Supabase calls run concurrently.
_db_executor = concurrent.futures.ThreadPoolExecutor(
    max_workers=10,
    thread_name_prefix="supabase-db",
)


def run_sync(func):
    """
    Decorator to run synchronous Supabase operations in async context.
    Supabase Python SDK is synchronous, so we need this wrapper.
    Uses a dedicated bounded thread pool instead of the default executor.
    """
    @wraps(func)
    async def wrapper(*args, **kwargs):
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(_db_executor, lambda: func(*args, **kwargs))
    return wrapper
