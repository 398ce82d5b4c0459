import os
from collections.abc import Generator
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

os.environ.setdefault('APP_ENV', 'test')
os.environ.setdefault('KNOWN_SUBDOMAINS', 'acme,globex')
os.environ.setdefault('TLD_COMPONENTS', '1')

from subdomain_router.core.config import get_settings
from subdomain_router.main import app
from subdomain_router.multitenancy.config import reset_config


@pytest.fixture(autouse=True)
def subdomain_config() -> Generator[None, None, None]:
    get_settings.cache_clear()
    reset_config()
    yield
    get_settings.cache_clear()
    reset_config()


@pytest.fixture()
def client() -> Generator[TestClient, None, None]:
    with TestClient(app) as api_client:
        yield api_client


def fake_request(*subdomains: str) -> SimpleNamespace:
    return SimpleNamespace(subdomains=list(subdomains), env={})


def host_headers(host: str) -> dict[str, str]:
    return {'host': host}
