"""Error taxonomy (domain)

Every failure a CRUD operation can surface is a CrudError tagged with an
ErrorKind.  There are no per-kind subclasses; callers branch on ``kind``.

- local precondition: INCORRECT_URI, OBJECT_DOES_NOT_EXIST, OBJECT_ALREADY_EXISTS
- decode: INCORRECT_JSON_STRUCTURE, EMPTY_DATA
- remote: SERVER (decoded from a {"code", "message"} payload)
- transport: CUSTOM (wraps an httpx error that never reached the application layer)
"""

from __future__ import annotations

import gettext
from collections.abc import Mapping
from typing import Any

import httpx

from restcrud.domain.models.enums import ErrorKind

_ = gettext.translation("restcrud", fallback=True).gettext

DEFAULT_APP_DOMAIN = "restcrud"

_LOCAL_CODES: dict[ErrorKind, int] = {
    ErrorKind.INCORRECT_JSON_STRUCTURE: 1001,
    ErrorKind.EMPTY_DATA: 1002,
    ErrorKind.INCORRECT_URI: 10000,
    ErrorKind.OBJECT_DOES_NOT_EXIST: 10001,
    ErrorKind.OBJECT_ALREADY_EXISTS: 10002,
}

_LOCAL_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.INCORRECT_JSON_STRUCTURE: "Incorrect JSON structure",
    ErrorKind.EMPTY_DATA: "Empty response body from server",
    ErrorKind.INCORRECT_URI: "URI for model is incorrect",
    ErrorKind.OBJECT_DOES_NOT_EXIST: "Object does not exist",
    ErrorKind.OBJECT_ALREADY_EXISTS: "Object already exists",
}


class CrudError(Exception):
    """A failed CRUD operation.

    code and message are fixed for local kinds and carried for SERVER and
    CUSTOM.  domain is the application domain for local kinds, the
    configured server domain for SERVER and the wrapped domain for CUSTOM.
    """

    def __init__(
        self,
        kind: ErrorKind,
        *,
        code: int | None = None,
        message: str | None = None,
        domain: str | None = None,
    ) -> None:
        if not kind.is_local and (code is None or message is None):
            raise ValueError(f"{kind.value} errors require a code and a message")
        self._kind = kind
        self._code = code if code is not None else _LOCAL_CODES.get(kind)
        self._message = message
        self._domain = domain
        super().__init__(self.message)

    # ------------------------------------------------------------------ #
    # Constructors                                                         #
    # ------------------------------------------------------------------ #

    @classmethod
    def local(cls, kind: ErrorKind, app_domain: str | None = None) -> CrudError:
        if not kind.is_local:
            raise ValueError(f"{kind.value} is not a local error kind")
        return cls(kind, domain=app_domain)

    @classmethod
    def server(cls, code: int, message: str, server_domain: str = "") -> CrudError:
        return cls(ErrorKind.SERVER, code=code, message=message, domain=server_domain)

    @classmethod
    def custom(cls, code: int, domain: str, message: str) -> CrudError:
        return cls(ErrorKind.CUSTOM, code=code, message=message, domain=domain)

    @classmethod
    def from_json(cls, data: Any, server_domain: str = "") -> CrudError | None:
        """Decode {"code": int, "message": str}; None if either is missing or mistyped."""
        if not isinstance(data, Mapping):
            return None
        code = data.get("code")
        message = data.get("message")
        if not isinstance(code, int) or isinstance(code, bool):
            return None
        if not isinstance(message, str):
            return None
        return cls.server(code, message, server_domain)

    @classmethod
    def list_from_json(cls, data: Any, server_domain: str = "") -> list[CrudError] | None:
        """Decode a JSON array of server errors; None unless every item decodes."""
        if not isinstance(data, list):
            return None
        errors: list[CrudError] = []
        for item in data:
            error = cls.from_json(item, server_domain)
            if error is None:
                return None
            errors.append(error)
        return errors

    @classmethod
    def from_transport(cls, exc: httpx.HTTPError) -> CrudError:
        """Wrap a transport failure with its native diagnostics.

        code is the first integer errno along the __cause__/__context__
        chain (httpx -> httpcore -> OSError -> ...), or -1.
        """
        package = type(exc).__module__.split(".")[0]
        domain = f"{package}.{type(exc).__qualname__}"
        return cls.custom(_native_code(exc), domain, str(exc) or type(exc).__name__)

    # ------------------------------------------------------------------ #
    # Accessors                                                            #
    # ------------------------------------------------------------------ #

    @property
    def kind(self) -> ErrorKind:
        return self._kind

    @property
    def code(self) -> int:
        return self._code  # type: ignore[return-value]

    @property
    def message(self) -> str:
        if self._message is not None:
            return self._message
        return _(_LOCAL_MESSAGES[self._kind])

    @property
    def domain(self) -> str:
        if self._domain is not None:
            return self._domain
        if self._kind is ErrorKind.SERVER:
            return ""
        return DEFAULT_APP_DOMAIN

    @property
    def is_local(self) -> bool:
        return self._kind.is_local

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "code": self.code,
            "domain": self.domain,
            "message": self.message,
        }

    def __reduce__(self):
        return (_restore, (type(self), self._kind, self._code, self._message, self._domain))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CrudError):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        return hash((self.kind, self.code, self.domain, self.message))

    def __repr__(self) -> str:
        return (
            f"CrudError(kind={self.kind.value!r}, code={self.code!r}, "
            f"domain={self.domain!r}, message={self.message!r})"
        )


def _native_code(exc: BaseException) -> int:
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        code = getattr(current, "errno", None)
        if isinstance(code, int) and not isinstance(code, bool):
            return code
        current = current.__cause__ or current.__context__
    return -1


def _restore(
    cls: type[CrudError],
    kind: ErrorKind,
    code: int | None,
    message: str | None,
    domain: str | None,
) -> CrudError:
    return cls(kind, code=code, message=message, domain=domain)
