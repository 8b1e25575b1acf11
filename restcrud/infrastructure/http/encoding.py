"""Query-string encoding for nested parameters.

Uses the bracket convention common to Rails-style APIs:

    {"limit": 2, "order": ["id.asc"], "filter": {"active": True}}
    -> limit=2&order[]=id.asc&filter[active]=1

Keys are emitted in sorted order so the same parameters always produce the
same URL.  Booleans encode as 1/0 and None as an empty value.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def query_pairs(parameters: Mapping[str, Any]) -> list[tuple[str, str]]:
    """Flatten ``parameters`` into (key, value) pairs for httpx ``params=``."""
    pairs: list[tuple[str, str]] = []
    for key in sorted(parameters):
        pairs.extend(_components(key, parameters[key]))
    return pairs


def _components(key: str, value: Any) -> list[tuple[str, str]]:
    if isinstance(value, Mapping):
        pairs: list[tuple[str, str]] = []
        for sub_key in sorted(value, key=str):
            pairs.extend(_components(f"{key}[{sub_key}]", value[sub_key]))
        return pairs
    if isinstance(value, (list, tuple)):
        pairs = []
        for item in value:
            pairs.extend(_components(f"{key}[]", item))
        return pairs
    return [(key, _scalar(value))]


def _scalar(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)
