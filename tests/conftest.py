# tests/conftest.py

import pytest
from fastapi.testclient import TestClient

from itemboard.config import Settings
from itemboard.db.store import ItemStore
from itemboard.main import create_app


@pytest.fixture
def settings():
    return Settings(database_url="sqlite://", log_level="WARNING")


@pytest.fixture
def store():
    store = ItemStore.from_url("sqlite://")
    store.init_schema()
    yield store
    store.dispose()


@pytest.fixture
def broken_store(tmp_path):
    # parent directory does not exist, so sqlite cannot open the file
    store = ItemStore.from_url(f"sqlite:///{tmp_path / 'missing' / 'db.sqlite'}")
    yield store
    store.dispose()


@pytest.fixture
def api(settings, store):
    with TestClient(create_app(settings, store=store)) as client:
        yield client


@pytest.fixture
def broken_api(settings, broken_store):
    with TestClient(create_app(settings, store=broken_store)) as client:
        yield client
