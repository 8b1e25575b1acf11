"""httpx implementation of Repository."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

import httpx
from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from restcrud.domain.errors import CrudError
from restcrud.domain.models.enums import ErrorKind, HttpMethod, ParameterEncoding
from restcrud.domain.models.parameters import Parameters
from restcrud.domain.repositories.base import Repository, T
from restcrud.domain.services.diff import update_body
from restcrud.infrastructure.config import CrudConfiguration, default_configuration
from restcrud.infrastructure.http.client import build_async_client
from restcrud.infrastructure.http.request_builder import build_request
from restcrud.infrastructure.http.responses import check_payload, decode_list, decode_object

logger = logging.getLogger(__name__)


class RestRepository(Repository[T]):
    """CRUD access to ``model`` over its REST collection.

    Without an injected client a fresh AsyncClient is opened per call and
    closed once the response has been read.  Without an injected
    configuration the process default is read at each call.
    """

    def __init__(
        self,
        model: type[T],
        config: CrudConfiguration | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._model = model
        self._config = config
        self._client = client

    @property
    def model(self) -> type[T]:
        return self._model

    @property
    def config(self) -> CrudConfiguration:
        return self._config if self._config is not None else default_configuration()

    # ------------------------------------------------------------------ #
    # Transport                                                            #
    # ------------------------------------------------------------------ #

    def _request(
        self,
        config: CrudConfiguration,
        path: str,
        method: HttpMethod = HttpMethod.GET,
        parameters: dict[str, Any] | None = None,
        encoding: ParameterEncoding = ParameterEncoding.METHOD_DEPENDENT,
    ) -> httpx.Request:
        request = build_request(config, path, method, parameters, encoding)
        if request is None:
            raise CrudError.local(ErrorKind.INCORRECT_URI, config.app_domain)
        return request

    async def _send(self, request: httpx.Request, config: CrudConfiguration) -> httpx.Response:
        logger.debug("Dispatching %s %s", request.method, request.url)
        try:
            if self._client is not None:
                return await self._client.send(request)
            async with build_async_client(config) as client:
                return await client.send(request)
        except httpx.HTTPError as exc:
            logger.warning("Transport failure on %s %s: %s", request.method, request.url, exc)
            raise CrudError.from_transport(exc) from exc

    def _require_id(self, entity: T, config: CrudConfiguration) -> int:
        if entity.id is None:
            raise CrudError.local(ErrorKind.OBJECT_DOES_NOT_EXIST, config.app_domain)
        return entity.id

    def _member_path(self, id: int) -> str:
        return f"{self._model.path}/{id}"

    def _query(
        self,
        config: CrudConfiguration,
        limit: int | None,
        offset: int | None,
        sorted_by: Sequence[str] | None,
        conditions: dict[str, Any] | None,
    ) -> dict[str, Any]:
        try:
            return Parameters(
                limit=limit,
                offset=offset,
                sorted_by=list(sorted_by) if sorted_by is not None else None,
                conditions=conditions,
            ).to_json()
        except (ValidationError, PydanticSerializationError) as exc:
            logger.warning("Query parameters for %s cannot be encoded: %s", self._model.path, exc)
            raise CrudError.local(ErrorKind.INCORRECT_URI, config.app_domain) from exc

    # ------------------------------------------------------------------ #
    # Repository primitives                                                #
    # ------------------------------------------------------------------ #

    async def find_one(self, id: int) -> T:
        config = self.config
        request = self._request(config, self._member_path(id))
        response = await self._send(request, config)
        return decode_object(response, self._model, config)

    async def all(
        self,
        limit: int | None = None,
        offset: int | None = None,
        sorted_by: Sequence[str] | None = None,
        conditions: dict[str, Any] | None = None,
    ) -> list[T]:
        config = self.config
        request = self._request(
            config,
            self._model.path,
            parameters=self._query(config, limit, offset, sorted_by, conditions),
        )
        response = await self._send(request, config)
        return decode_list(response, self._model, config)

    async def create(self, entity: T) -> T:
        config = self.config
        if entity.id is not None:
            raise CrudError.local(ErrorKind.OBJECT_ALREADY_EXISTS, config.app_domain)
        request = self._request(
            config,
            self._model.path,
            HttpMethod.POST,
            entity.to_json(),
            ParameterEncoding.JSON,
        )
        response = await self._send(request, config)
        return decode_object(response, self._model, config)

    async def update(self, entity: T, old: T | None = None) -> T:
        config = self.config
        id = self._require_id(entity, config)
        request = self._request(
            config,
            self._member_path(id),
            HttpMethod.PUT if old is None else HttpMethod.PATCH,
            update_body(entity, old),
            ParameterEncoding.JSON,
        )
        response = await self._send(request, config)
        return decode_object(response, self._model, config)

    async def destroy(self, entity: T) -> None:
        config = self.config
        id = self._require_id(entity, config)
        request = self._request(config, self._member_path(id), HttpMethod.DELETE)
        response = await self._send(request, config)
        check_payload(response, config)

    async def head(
        self,
        limit: int | None = None,
        offset: int | None = None,
        sorted_by: Sequence[str] | None = None,
        conditions: dict[str, Any] | None = None,
    ) -> dict[str, str]:
        config = self.config
        request = self._request(
            config,
            self._model.path,
            HttpMethod.HEAD,
            self._query(config, limit, offset, sorted_by, conditions),
        )
        response = await self._send(request, config)
        check_payload(response, config)
        return dict(response.headers)
