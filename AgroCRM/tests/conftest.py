import pytest
from fastapi.testclient import TestClient

from config.settings import settings
from utils.store import MemoryStore, get_store


@pytest.fixture()
def store():
    return MemoryStore()


@pytest.fixture()
def seeded_store():
    return MemoryStore.from_seed(settings.SEED_DATA_DIR)


@pytest.fixture()
def client(seeded_store):
    from main import app

    app.dependency_overrides[get_store] = lambda: seeded_store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
