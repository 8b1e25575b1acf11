"""Domain enumerations for the CRUD client.

All string-valued enums use str mixin so they compare equal to plain
strings and can be handed straight to httpx.
"""

from enum import Enum


class HttpMethod(str, Enum):
    GET = "GET"
    HEAD = "HEAD"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"

    @property
    def is_read(self) -> bool:
        """True for methods whose parameters travel in the query string."""
        return self in (HttpMethod.GET, HttpMethod.HEAD, HttpMethod.DELETE)


class ParameterEncoding(str, Enum):
    METHOD_DEPENDENT = "method_dependent"
    QUERY = "query"
    JSON = "json"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    def apply(self, key: str) -> str:
        """Return the sort key with the direction suffix appended."""
        return f"{key}.{self.value}"


class ErrorKind(str, Enum):
    INCORRECT_URI = "incorrect_uri"
    OBJECT_DOES_NOT_EXIST = "object_does_not_exist"
    OBJECT_ALREADY_EXISTS = "object_already_exists"
    INCORRECT_JSON_STRUCTURE = "incorrect_json_structure"
    EMPTY_DATA = "empty_data"
    SERVER = "server"
    CUSTOM = "custom"

    @property
    def is_local(self) -> bool:
        """True for kinds raised by the client itself rather than a peer."""
        return self not in (ErrorKind.SERVER, ErrorKind.CUSTOM)
