"""httpx.AsyncClient factory.

Centralises timeout and redirect policy so every repository dispatches
requests the same way, and so tests can inject a mocked client instead.
"""

from __future__ import annotations

import httpx

from restcrud.infrastructure.config import CrudConfiguration, default_configuration


def build_async_client(config: CrudConfiguration | None = None) -> httpx.AsyncClient:
    """Create an AsyncClient carrying the configured transport policy.

    Headers are not set here: build_request() attaches them per request.
    """
    config = config if config is not None else default_configuration()
    return httpx.AsyncClient(
        timeout=httpx.Timeout(config.timeout_seconds),
        follow_redirects=config.follow_redirects,
    )
