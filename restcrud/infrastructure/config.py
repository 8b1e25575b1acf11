"""Client configuration and the process-wide default instance.

CrudConfiguration is read from RESTCRUD_* environment variables (and a
local .env) but stays mutable so the host application can set the base URL
or header provider at runtime.  Repositories take a configuration
explicitly; those built without one share default_configuration().
"""

from __future__ import annotations

from collections.abc import Callable

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from restcrud.domain.errors import DEFAULT_APP_DOMAIN

HeaderProvider = Callable[[], dict[str, str]]


class CrudConfiguration(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="RESTCRUD_",
        env_file=".env",
        extra="ignore",
    )

    base_url: str = Field(
        default="",
        description="API root every model path is appended to.",
    )
    server_domain: str = Field(
        default="",
        description="Domain reported by errors decoded from server payloads.",
    )
    app_domain: str = Field(
        default=DEFAULT_APP_DOMAIN,
        min_length=1,
        description="Domain reported by errors raised locally by the client.",
    )
    custom_headers: HeaderProvider | None = Field(
        default=None,
        exclude=True,
        description="Called once per request build; its items are set as headers.",
    )
    timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Per-request timeout applied by the HTTP client.",
    )
    follow_redirects: bool = Field(default=True)

    def headers(self) -> dict[str, str]:
        """Current custom headers, or an empty mapping without a provider."""
        if self.custom_headers is None:
            return {}
        return dict(self.custom_headers())


_default: CrudConfiguration | None = None


def default_configuration() -> CrudConfiguration:
    """Return the shared configuration, creating it on first use."""
    global _default
    if _default is None:
        _default = CrudConfiguration()
    return _default


def set_default_configuration(config: CrudConfiguration | None) -> None:
    """Replace the shared configuration; None resets it to lazy creation."""
    global _default
    _default = config
