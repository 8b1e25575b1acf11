"""Model base class bound to a REST resource path.

These are pure domain objects: no transport concerns live here.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic_core import PydanticSerializationError

M = TypeVar("M", bound="CrudModel")


class CrudModel(BaseModel):
    """An application record persisted behind a REST collection.

    Subclasses set ``path`` to the collection segment (e.g. "users").
    A record whose id is None has not been persisted yet.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    path: ClassVar[str] = ""

    id: int | None = None

    @property
    def is_new(self) -> bool:
        return self.id is None

    @property
    def resource_path(self) -> str | None:
        """Path of this record's resource, or None for unsaved records."""
        if self.id is None:
            return None
        return f"{type(self).path}/{self.id}"

    def to_json(self) -> dict[str, Any] | None:
        """JSON object for this record with unset (None) fields omitted.

        Returns None when a field value cannot be serialised.
        """
        try:
            return self.model_dump(mode="json", by_alias=True, exclude_none=True)
        except PydanticSerializationError:
            return None

    @classmethod
    def from_json(cls: type[M], data: Any) -> M | None:
        """Decode a JSON object into a record, or None on shape mismatch."""
        if not isinstance(data, Mapping):
            return None
        try:
            return cls.model_validate(data)
        except ValidationError:
            return None

    @classmethod
    def list_from_json(cls: type[M], data: Any) -> list[M] | None:
        """Decode a JSON array; None unless every element decodes."""
        if not isinstance(data, list):
            return None
        records: list[M] = []
        for item in data:
            record = cls.from_json(item)
            if record is None:
                return None
            records.append(record)
        return records


def pack(value: int | None) -> str:
    """Render an optional integer for a path or text segment."""
    return "null" if value is None else str(value)
