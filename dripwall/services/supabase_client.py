from __future__ import annotations

import logging
import os
from typing import Optional

from supabase import Client, create_client

logger = logging.getLogger(__name__)

DEFAULT_TABLE = 'drips'


def _get_env_value(*names: str) -> Optional[str]:
    for name in names:
        value = os.getenv(name)
        if value:
            return value
    return None


def resolve_table_name() -> str:
    return _get_env_value('DRIPS_TABLE') or DEFAULT_TABLE


def create_drip_client() -> Client:
    """Build the Supabase client used for every request of one app instance.

    The URL and public anon key are read from the environment; the
    ``PUBLIC_SUPABASE_*`` spellings are accepted as well.
    """

    url = _get_env_value('SUPABASE_URL', 'PUBLIC_SUPABASE_URL')
    key = _get_env_value('SUPABASE_ANON_KEY', 'PUBLIC_SUPABASE_ANON_KEY')
    if not url or not key:
        raise RuntimeError(
            'SUPABASE_URL and SUPABASE_ANON_KEY are required to reach the drips table.'
        )

    client = create_client(url, key)
    logger.info('Supabase client initialised for %s', url)
    return client
