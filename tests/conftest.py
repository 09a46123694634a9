"""Shared fixtures: a throwaway SQLite database and an API client."""

import os
import tempfile
from pathlib import Path

import pytest

# must be set before anything under taskflow is imported
_DB_DIR = tempfile.mkdtemp(prefix="taskflow-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{Path(_DB_DIR) / 'test.db'}"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["FRONTEND_ORIGIN"] = "https://app.taskflow.example"

from fastapi.testclient import TestClient  # noqa: E402

from taskflow.database import SessionLocal, init_db  # noqa: E402
from taskflow.main import app  # noqa: E402

PASSWORD = "S3cret!pass"
FRONTEND_ORIGIN = os.environ["FRONTEND_ORIGIN"]


@pytest.fixture(autouse=True)
def fresh_tables():
    init_db(drop=True)
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def logged_in_client(client):
    resp = client.post("/join", json={"email": "alice@example.com", "password": PASSWORD})
    assert resp.status_code == 201
    return client
