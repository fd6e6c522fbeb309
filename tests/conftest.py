"""Shared test fixtures for the API and page generator suites."""

from typing import List

import pytest
from fastapi.testclient import TestClient

from landing_api.core.config import Settings, get_settings
from landing_api.main import create_app


class FakeRecordSource:
    """In-memory record source that remembers which views were queried."""

    def __init__(self, records=None, error: Exception | None = None):
        self.records = records or []
        self.error = error
        self.views: List[str] = []

    def list_records(self, view: str):
        self.views.append(view)
        if self.error:
            raise self.error
        return list(self.records)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings():
    return Settings(_env_file=None, airtable_api_key="key-test", airtable_base_id="app-test")


@pytest.fixture
def airtable_records():
    return [
        {
            "id": "rec1",
            "createdTime": "2024-01-01T00:00:00.000Z",
            "fields": {
                "Titulo": "Widget",
                "Resumen": "A widget",
                "URL Imagen": [{"id": "att1", "url": "http://x/i.png", "filename": "i.png"}],
                "Enlace MercadoLibre": "http://ml/1",
                "Enlace WhatsApp": "http://wa/1",
            },
        },
        {
            "id": "rec2",
            "createdTime": "2024-01-02T00:00:00.000Z",
            "fields": {
                "Titulo": "Gadget",
                "Resumen": "A gadget",
                "Enlace MercadoLibre": "http://ml/2",
                "Enlace WhatsApp": "http://wa/2",
            },
        },
    ]


@pytest.fixture
def make_client(settings):
    def _make(record_source):
        return TestClient(create_app(settings, record_source=record_source))
    return _make
