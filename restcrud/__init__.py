"""Generic CRUD client for REST-style JSON APIs.

Define a model bound to a collection path, then obtain a repository:

    class User(CrudModel):
        path: ClassVar[str] = "users"
        name: str

    users = get_repository(User)
    user = await users.find(42)

Import from this package to avoid coupling application code to individual
module paths.
"""

from restcrud.domain.errors import CrudError
from restcrud.domain.models import (
    CrudModel,
    ErrorKind,
    HttpMethod,
    ParameterEncoding,
    Parameters,
    SortDirection,
    pack,
)
from restcrud.domain.repositories import Repository
from restcrud.domain.services import compute_diff
from restcrud.infrastructure.config import (
    CrudConfiguration,
    default_configuration,
    set_default_configuration,
)
from restcrud.infrastructure.http import build_async_client, build_request
from restcrud.infrastructure.repositories import RestRepository, get_repository

__all__ = [
    "CrudConfiguration",
    "CrudError",
    "CrudModel",
    "ErrorKind",
    "HttpMethod",
    "ParameterEncoding",
    "Parameters",
    "Repository",
    "RestRepository",
    "SortDirection",
    "build_async_client",
    "build_request",
    "compute_diff",
    "default_configuration",
    "get_repository",
    "pack",
    "set_default_configuration",
]
