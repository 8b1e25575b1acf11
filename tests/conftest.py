import pytest

from restcrud.infrastructure.config import set_default_configuration


@pytest.fixture(autouse=True)
def _reset_default_configuration(monkeypatch):
    for name in ("RESTCRUD_BASE_URL", "RESTCRUD_SERVER_DOMAIN", "RESTCRUD_APP_DOMAIN"):
        monkeypatch.delenv(name, raising=False)
    set_default_configuration(None)
    yield
    set_default_configuration(None)
