"""Flask application factory."""

from __future__ import annotations

import logging
from typing import Any, Optional

from dotenv import load_dotenv
from flask import Flask

from .services.drip_service import DripService
from .services.supabase_client import create_drip_client, resolve_table_name

logger = logging.getLogger(__name__)


def create_app(drip_client: Optional[Any] = None) -> Flask:
    """Configure and return the Flask application.

    ``drip_client`` lets callers (tests, scripts) hand in an already built
    Supabase client. When omitted the client is created once from the
    environment and shared by every request served by this app.
    """

    load_dotenv()

    app = Flask(__name__)

    if drip_client is None:
        drip_client = create_drip_client()

    app.drip_service = DripService(drip_client, table=resolve_table_name())

    from .routes import main_bp

    app.register_blueprint(main_bp)

    return app
