"""Pytest configuration and fixtures."""

import os

# Must be set before the app modules build the engine.
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient

from config.database import Base, SessionLocal, engine, init_db
from main import app


@pytest.fixture(autouse=True)
def schema():
    """Fresh in-memory schema for every test."""
    init_db()
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture
def baby_id(client: TestClient) -> int:
    """A baby owned by user-1."""
    response = client.post("/api/baby", json={"name": "Mali", "userId": "user-1"})
    return response.json()["id"]
