import os

os.environ.setdefault("SESSION_SECRET", "test-session-secret")
os.environ.setdefault("MONGO_DB", "notes_test")

import mongomock
import pytest
from fastapi.testclient import TestClient

from notes_web.core.config import settings
from notes_web.infrastructure.db import mongo
from notes_web.main import app
from notes_web.services import auth_service

PASSWORD = "racheliscool"


@pytest.fixture
def db(monkeypatch):
    database = mongomock.MongoClient()[settings.mongo_db]
    monkeypatch.setattr(mongo, "_db", database)
    return database


@pytest.fixture
def client(db):
    # Sin `with`: el lifespan (conexión real a Mongo) no se ejecuta.
    test_client = TestClient(app)
    yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def user(db):
    return auth_service.register_user(email="rachel@remix.run", password=PASSWORD)


@pytest.fixture
def other_user(db):
    return auth_service.register_user(email="other@remix.run", password=PASSWORD)


@pytest.fixture
def auth_client(client, user):
    resp = client.post(
        "/login", data={"email": user["email"], "password": PASSWORD}, follow_redirects=False
    )
    assert resp.status_code == 303
    return client
