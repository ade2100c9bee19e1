"""
Fixtures compartidos: base MongoDB en memoria (mongomock) y TestClient.
"""

import os

import mongomock
import pytest
from fastapi.testclient import TestClient

os.environ.setdefault("ENV", "test")
os.environ.setdefault("SECRET_KEY", "test-secret")

from database import connection  # noqa: E402
from main import app  # noqa: E402


@pytest.fixture(autouse=True)
def mongo_db():
    """Cada test arranca con una base vacía e índices creados."""
    db = mongomock.MongoClient()["chat-app-test"]
    connection.set_db(db)
    connection.init_db()
    yield db
    connection.set_db(None)


@pytest.fixture
def client():
    # sin "with": no se ejecuta el lifespan, la base ya está inyectada
    return TestClient(app)


@pytest.fixture
def create_user(client):
    def _create(username="alice", email="alice@example.com", password="s3cretpass", **extra):
        payload = {"username": username, "email": email, "password": password, **extra}
        resp = client.post("/users/", json=payload)
        assert resp.status_code == 201, resp.text
        return resp.json()
    return _create
