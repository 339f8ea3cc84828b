import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from app.settings import Settings
from app.store import UserStore


@pytest.fixture
def store() -> UserStore:
    return UserStore()


@pytest.fixture
def client(store):
    app = create_app(store=store, settings=Settings(_env_file=None))
    with TestClient(app) as c:
        yield c
