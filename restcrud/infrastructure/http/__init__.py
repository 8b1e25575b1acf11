"""HTTP plumbing: request building, query encoding, client factory, response routing."""

from .client import build_async_client
from .encoding import query_pairs
from .request_builder import build_request, resolve_url
from .responses import EMPTY, check_payload, decode_list, decode_object

__all__ = [
    "EMPTY",
    "build_async_client",
    "build_request",
    "check_payload",
    "decode_list",
    "decode_object",
    "query_pairs",
    "resolve_url",
]
