"""Logging setup for the WSGI entrypoint."""

from __future__ import annotations

import logging
import os


def setup_logging(level: str | int | None = None) -> None:
    """Configure the root logger once for the whole process."""
    if level is None:
        level = os.environ.get('LOG_LEVEL', 'INFO').upper()
    fmt = '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s'
    logging.basicConfig(level=level, format=fmt)
    # Supabase logs every request through httpx at INFO
    logging.getLogger('httpx').setLevel(logging.WARNING)
    logging.getLogger('httpcore').setLevel(logging.WARNING)
