"""Concrete REST repository implementations.

Exports RestRepository and the get_repository() factory for wiring at the
application boundary.
"""

from __future__ import annotations

import httpx

from restcrud.domain.repositories.base import T
from restcrud.infrastructure.config import CrudConfiguration

from .rest import RestRepository


def get_repository(
    model: type[T],
    config: CrudConfiguration | None = None,
    client: httpx.AsyncClient | None = None,
) -> RestRepository[T]:
    """Construct a repository for ``model``.

        users = get_repository(User, client=shared_client)
        user = await users.find(42)
        await users.save(user.model_copy(update={"name": "Ann"}))
    """
    return RestRepository(model, config=config, client=client)


__all__ = ["RestRepository", "get_repository"]
