"""Partial-update diff.

Computes the minimal PATCH body that moves a record from its previous JSON
representation to its current one:

    removed key    -> None (sent as JSON null)
    changed value  -> new value
    added key      -> new value
    unchanged key  -> omitted

Values are compared structurally: mappings and sequences recurse, and
booleans never equal numbers (True != 1), matching JSON's own type split.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from restcrud.domain.models.base import CrudModel


def values_equal(left: Any, right: Any) -> bool:
    """Structural JSON equality."""
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left == right
    if isinstance(left, Mapping) and isinstance(right, Mapping):
        if left.keys() != right.keys():
            return False
        return all(values_equal(left[key], right[key]) for key in left)
    if isinstance(left, (list, tuple)) and isinstance(right, (list, tuple)):
        if len(left) != len(right):
            return False
        return all(values_equal(a, b) for a, b in zip(left, right))
    if isinstance(left, (Mapping, list, tuple)) or isinstance(right, (Mapping, list, tuple)):
        return False
    return left == right


def compute_diff(new: Mapping[str, Any], old: Mapping[str, Any]) -> dict[str, Any]:
    """Return the field-level delta from ``old`` to ``new``."""
    diff: dict[str, Any] = {}
    for key, old_value in old.items():
        if key not in new:
            diff[key] = None
        elif not values_equal(new[key], old_value):
            diff[key] = new[key]
    for key, new_value in new.items():
        if key not in old:
            diff[key] = new_value
    return diff


def update_body(record: CrudModel, previous: CrudModel | None = None) -> dict[str, Any] | None:
    """Request body for updating ``record``.

    With a previous state the body is the diff; without one, or when either
    side cannot be serialised, it is the record's full representation.
    """
    current = record.to_json()
    baseline = previous.to_json() if previous is not None else None
    if current is None or baseline is None:
        return current
    return compute_diff(current, baseline)
