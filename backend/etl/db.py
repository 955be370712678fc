from typing import Optional

from supabase import Client, create_client

import settings

_client: Optional[Client] = None


def get_supabase() -> Optional[Client]:
    """Get or create the Supabase client for rating jobs.

    Returns None when SUPABASE_URL / SUPABASE_SECRET_KEY are not configured.
    """
    global _client
    if _client is None:
        if settings.SUPABASE_URL and settings.SUPABASE_SECRET_KEY:
            _client = create_client(settings.SUPABASE_URL, settings.SUPABASE_SECRET_KEY)
    return _client
