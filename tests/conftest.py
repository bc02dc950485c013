"""Shared fixtures: an isolated SQLite store per test and a running app."""

import pytest
from fastapi.testclient import TestClient

from workshop_api.app.core.config import Settings
from workshop_api.app.core.db import DocumentStore
from workshop_api.app.core.security import ADMIN_PASSWORD_HEADER
from workshop_api.app.main import create_app

ADMIN_PASSWORD = "s3cret-pass"


@pytest.fixture
def settings(tmp_path):
    return Settings(
        database_url=str(tmp_path / "workshop.db"),
        workshop_id="test-workshop",
        admin_password=ADMIN_PASSWORD,
        store_timeout=5.0,
    )


@pytest.fixture
def store(settings):
    store = DocumentStore(settings.database_url, namespace=f"workshop/{settings.workshop_id}")
    store.init()
    return store


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_headers():
    return {ADMIN_PASSWORD_HEADER: ADMIN_PASSWORD}
