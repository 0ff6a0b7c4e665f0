# csv_dashboard/tests/conftest.py

import base64

import httpx
import pytest
from fastapi.testclient import TestClient

from csv_dashboard.main import app
from csv_dashboard.services.persistence_client import PersistenceClient
from csv_dashboard.utils.data_store import CsvFileStore, get_store

SAMPLE_CSV = (
    b"Label,Value,Note\n"
    b"Apples,10,fresh\n"
    b"Pears,,missing value\n"
    b",5,no label\n"
    b"Plums,2.5,\n"
)

SAMPLE_ROWS = [
    {"Label": "Apples", "Value": 10, "Note": "fresh"},
    {"Label": "Pears", "Value": None, "Note": "missing value"},
    {"Label": None, "Value": 5, "Note": "no label"},
    {"Label": "Plums", "Value": 2.5, "Note": None},
]


def as_upload_contents(raw: bytes) -> str:
    return "data:text/csv;base64," + base64.b64encode(raw).decode("ascii")


def mock_client(handler) -> PersistenceClient:
    http = httpx.Client(transport=httpx.MockTransport(handler))
    return PersistenceClient(base_url="http://backend.test", http=http)


@pytest.fixture
def store():
    return CsvFileStore()


@pytest.fixture
def api_client(store):
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def persistence_client(api_client):
    return PersistenceClient(base_url=str(api_client.base_url), http=api_client)
