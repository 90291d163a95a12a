import pytest
from fastapi.testclient import TestClient

from idr_converter.core.config import Settings
from idr_converter.main import create_app
from idr_converter.models.currency import get_currency_table


@pytest.fixture
def settings():
    return Settings(_env_file=None, debug=True, log_json=False)


@pytest.fixture
def client(settings):
    return TestClient(create_app(settings_override=settings))


@pytest.fixture
def table():
    return get_currency_table()


@pytest.fixture
def usd(table):
    return table.find_by_code("USD")


@pytest.fixture
def jpy(table):
    return table.find_by_code("JPY")
