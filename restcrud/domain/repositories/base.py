"""Generic repository base interface.

Repository[T] is the root abstraction for CRUD access to one model type.
Concrete implementations live in restcrud/infrastructure/repositories/ and
are wired at the application boundary via get_repository().

Design notes:
  - All methods are async; each call resolves or raises exactly once.
  - T is the domain model type, a CrudModel subclass bound to a path.
  - Only the transport primitives (find_one, all, create, update, destroy,
    head) are abstract.  The query helpers below are expressed in terms of
    all() so every implementation shares the same parameter semantics.
  - first()/last()/take() without a count return a single record or None;
    with a count they return a list.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any, Generic, TypeVar, overload

from restcrud.domain.models.base import CrudModel
from restcrud.domain.models.enums import SortDirection

T = TypeVar("T", bound=CrudModel)

DEFAULT_SORT: tuple[str, ...] = ("id",)


class Repository(ABC, Generic[T]):
    """Abstract CRUD interface for a REST-backed model."""

    @abstractmethod
    async def find_one(self, id: int) -> T:
        """Return the record with the given primary key."""

    @abstractmethod
    async def all(
        self,
        limit: int | None = None,
        offset: int | None = None,
        sorted_by: Sequence[str] | None = None,
        conditions: dict[str, Any] | None = None,
    ) -> list[T]:
        """Return the records matching the query parameters."""

    @abstractmethod
    async def create(self, entity: T) -> T:
        """Persist a new record.  Raises OBJECT_ALREADY_EXISTS if it has an id."""

    @abstractmethod
    async def update(self, entity: T, old: T | None = None) -> T:
        """Persist changes to an existing record.

        Sends the full record, or only the fields that differ from ``old``
        when a previous state is supplied.
        """

    @abstractmethod
    async def destroy(self, entity: T) -> None:
        """Remove an existing record.  Raises OBJECT_DOES_NOT_EXIST without an id."""

    @abstractmethod
    async def head(
        self,
        limit: int | None = None,
        offset: int | None = None,
        sorted_by: Sequence[str] | None = None,
        conditions: dict[str, Any] | None = None,
    ) -> dict[str, str]:
        """Return the response headers of a collection query."""

    # ------------------------------------------------------------------ #
    # Query helpers                                                        #
    # ------------------------------------------------------------------ #

    @overload
    async def find(self, id: int) -> T: ...

    @overload
    async def find(self, id: Sequence[int]) -> list[T]: ...

    async def find(self, id):
        """Retrieve one record by primary key, or several by a list of keys."""
        if isinstance(id, int):
            return await self.find_one(id)
        if not isinstance(id, Sequence) or isinstance(id, (str, bytes)):
            raise TypeError(f"find() expects an int or a sequence of ints, got {type(id).__name__}")
        return await self.all(conditions={"id": list(id)})

    @overload
    async def take(self) -> T | None: ...

    @overload
    async def take(self, count: int) -> list[T]: ...

    async def take(self, count=None):
        """Retrieve records without any implicit ordering."""
        records = await self.all(limit=1 if count is None else count)
        return _single(records) if count is None else records

    @overload
    async def first(
        self,
        count: None = None,
        conditions: dict[str, Any] | None = None,
        sorted_by: Sequence[str] = DEFAULT_SORT,
    ) -> T | None: ...

    @overload
    async def first(
        self,
        count: int,
        conditions: dict[str, Any] | None = None,
        sorted_by: Sequence[str] = DEFAULT_SORT,
    ) -> list[T]: ...

    async def first(self, count=None, conditions=None, sorted_by=DEFAULT_SORT):
        """Retrieve the first record(s), ascending on each key of ``sorted_by``.

        Keys must not carry ".asc"/".desc" suffixes; use order() for that.
        """
        return await self._directed(SortDirection.ASC, count, conditions, sorted_by)

    @overload
    async def last(
        self,
        count: None = None,
        conditions: dict[str, Any] | None = None,
        sorted_by: Sequence[str] = DEFAULT_SORT,
    ) -> T | None: ...

    @overload
    async def last(
        self,
        count: int,
        conditions: dict[str, Any] | None = None,
        sorted_by: Sequence[str] = DEFAULT_SORT,
    ) -> list[T]: ...

    async def last(self, count=None, conditions=None, sorted_by=DEFAULT_SORT):
        """Retrieve the last record(s), descending on each key of ``sorted_by``."""
        return await self._directed(SortDirection.DESC, count, conditions, sorted_by)

    async def find_by(self, conditions: dict[str, Any]) -> T | None:
        """Return the first record matching ``conditions``, or None."""
        return _single(await self.where(conditions))

    async def where(
        self,
        conditions: dict[str, Any],
        count: int | None = None,
        offset: int | None = None,
        sorted_by: Sequence[str] | None = None,
    ) -> list[T]:
        return await self.all(
            limit=count, offset=offset, sorted_by=sorted_by, conditions=conditions
        )

    async def order(
        self,
        by: Sequence[str],
        count: int | None = None,
        offset: int | None = None,
        conditions: dict[str, Any] | None = None,
    ) -> list[T]:
        """Retrieve records sorted by ``by`` exactly as given (suffixes allowed)."""
        return await self.all(limit=count, offset=offset, sorted_by=by, conditions=conditions)

    async def save(self, entity: T) -> T:
        """Update existing records and create new ones."""
        if entity.id is not None:
            return await self.update(entity)
        return await self.create(entity)

    async def _directed(
        self,
        direction: SortDirection,
        count: int | None,
        conditions: dict[str, Any] | None,
        sorted_by: Sequence[str],
    ):
        records = await self.all(
            limit=1 if count is None else count,
            sorted_by=[direction.apply(key) for key in sorted_by],
            conditions=conditions,
        )
        return _single(records) if count is None else records


def _single(records: list[T]) -> T | None:
    return records[0] if records else None
