"""Response routing shared by every CRUD operation.

Pipeline:
    read_payload          (body -> JSON value, or EMPTY for no body)
    raise_server_errors   ([{"code", "message"}, ...] -> first SERVER error)
    decode_object / decode_list / check_payload

HTTP status codes are not inspected beyond 204/205: servers report failures
through the error-list payload, and anything that does not decode into the
expected shape is INCORRECT_JSON_STRUCTURE.
"""

from __future__ import annotations

import json
import logging
from typing import Any, TypeVar

import httpx

from restcrud.domain.errors import CrudError
from restcrud.domain.models.base import CrudModel
from restcrud.domain.models.enums import ErrorKind
from restcrud.infrastructure.config import CrudConfiguration

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=CrudModel)

EMPTY = object()

_NO_CONTENT = (204, 205)


def read_payload(response: httpx.Response, config: CrudConfiguration) -> Any:
    """Parse the response body; EMPTY when there is none."""
    if not response.content.strip():
        return EMPTY
    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        logger.warning("Response body is not JSON: %s", exc)
        raise CrudError.local(ErrorKind.INCORRECT_JSON_STRUCTURE, config.app_domain) from exc


def raise_server_errors(payload: Any, config: CrudConfiguration) -> None:
    errors = CrudError.list_from_json(payload, config.server_domain)
    if errors:
        logger.warning("Server rejected request: %s", errors[0].message)
        raise errors[0]


def check_payload(response: httpx.Response, config: CrudConfiguration) -> Any:
    """Validate a response whose body is not decoded into models."""
    payload = read_payload(response, config)
    if payload is not EMPTY:
        raise_server_errors(payload, config)
    return payload


def _expect_payload(response: httpx.Response, config: CrudConfiguration) -> Any:
    payload = check_payload(response, config)
    if payload is EMPTY:
        kind = (
            ErrorKind.INCORRECT_JSON_STRUCTURE
            if response.status_code in _NO_CONTENT
            else ErrorKind.EMPTY_DATA
        )
        raise CrudError.local(kind, config.app_domain)
    return payload


def decode_object(response: httpx.Response, model: type[M], config: CrudConfiguration) -> M:
    record = model.from_json(_expect_payload(response, config))
    if record is None:
        logger.warning("Response does not decode as %s", model.__name__)
        raise CrudError.local(ErrorKind.INCORRECT_JSON_STRUCTURE, config.app_domain)
    return record


def decode_list(response: httpx.Response, model: type[M], config: CrudConfiguration) -> list[M]:
    records = model.list_from_json(_expect_payload(response, config))
    if records is None:
        logger.warning("Response does not decode as a list of %s", model.__name__)
        raise CrudError.local(ErrorKind.INCORRECT_JSON_STRUCTURE, config.app_domain)
    return records
