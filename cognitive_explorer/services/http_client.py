"""
HTTP client factory for outbound Cognitive Services calls.

A new httpx.AsyncClient is created per call and closed when the call
completes. Streamlit runs each action in its own event loop, so a client
bound to a previous loop cannot be reused.
"""

import logging
from typing import Optional

import httpx

from cognitive_explorer.services.secret_manager import get_settings

logger = logging.getLogger(__name__)


def create_http_client(transport: Optional[httpx.AsyncBaseTransport] = None) -> httpx.AsyncClient:
    """
    Creates an AsyncClient configured from settings.

    Args:
        transport: Optional transport override (e.g. httpx.MockTransport in tests)
    """
    settings = get_settings()
    timeout = httpx.Timeout(settings.http_timeout, connect=10.0)
    logger.debug(f"Creating HTTP client (timeout={settings.http_timeout}s)")

    return httpx.AsyncClient(
        timeout=timeout,
        follow_redirects=True,
        transport=transport,
    )
