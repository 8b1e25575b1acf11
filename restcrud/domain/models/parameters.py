"""List query parameters (paging, ordering, filtering)."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Parameters(BaseModel):
    """Query-shaping values for a collection request.

    Serialised names follow the server contract: sorted_by travels as
    "order" and conditions as "filter".  Unset members are omitted.
    Each sort key may carry an ".asc"/".desc" suffix.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    limit: int | None = None
    offset: int | None = None
    sorted_by: list[str] | None = Field(default=None, alias="order")
    conditions: dict[str, Any] | None = Field(default=None, alias="filter")

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
