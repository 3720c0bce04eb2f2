from __future__ import annotations

from functools import lru_cache

from supabase import Client, create_client
from supabase.lib.client_options import ClientOptions

from simple_tags.config import settings
from simple_tags.utils.logging import get_logger

logger = get_logger(__name__)


@lru_cache(maxsize=1)
def get_supabase_client() -> Client:
    """Return a cached Supabase client built from settings.

    Sessions are not persisted; the client is meant for server-side use by the
    Supabase document store.
    """
    logger.debug("Initializing Supabase client")
    if not settings.supabase_url:
        raise RuntimeError("supabase_url is required for the Supabase client")
    if not settings.supabase_key:
        raise RuntimeError("supabase_key is required for the Supabase client")
    return create_client(
        settings.supabase_url,
        settings.supabase_key,
        options=ClientOptions(auto_refresh_token=False, persist_session=False),
    )
