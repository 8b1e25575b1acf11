"""Request construction for model paths.

build_request() performs no I/O: it resolves the URL against the configured
base, applies headers and encodes parameters, returning an httpx.Request
ready for AsyncClient.send().  It returns None when the base URL cannot
produce a valid absolute URL; callers turn that into INCORRECT_URI.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from restcrud.domain.models.enums import HttpMethod, ParameterEncoding
from restcrud.infrastructure.config import CrudConfiguration

from .encoding import query_pairs

logger = logging.getLogger(__name__)

DEFAULT_HEADERS: dict[str, str] = {"Accept": "application/json"}


def resolve_url(base_url: str, path: str) -> httpx.URL | None:
    """Append ``path`` to ``base_url`` as a path component."""
    if not base_url:
        return None
    try:
        base = httpx.URL(base_url)
    except httpx.InvalidURL:
        return None
    if base.scheme not in ("http", "https") or not base.host:
        return None
    joined = base.path.rstrip("/") + "/" + path.lstrip("/")
    try:
        return base.copy_with(path=joined)
    except httpx.InvalidURL:
        return None


def build_request(
    config: CrudConfiguration,
    path: str,
    method: HttpMethod = HttpMethod.GET,
    parameters: Mapping[str, Any] | None = None,
    encoding: ParameterEncoding = ParameterEncoding.METHOD_DEPENDENT,
) -> httpx.Request | None:
    url = resolve_url(config.base_url, path)
    if url is None:
        logger.warning("Cannot build %s request: invalid base URL %r", method.value, config.base_url)
        return None

    headers = httpx.Headers(DEFAULT_HEADERS)
    for key, value in config.headers().items():
        headers[key] = value

    if encoding is ParameterEncoding.METHOD_DEPENDENT:
        encoding = ParameterEncoding.QUERY if method.is_read else ParameterEncoding.JSON

    params: list[tuple[str, str]] | None = None
    body: Any = None
    if parameters is not None:
        if encoding is ParameterEncoding.QUERY:
            params = query_pairs(parameters) or None
        else:
            body = dict(parameters)

    request = httpx.Request(method.value, url, params=params, headers=headers, json=body)
    logger.debug("Built request %s %s", request.method, request.url)
    return request
