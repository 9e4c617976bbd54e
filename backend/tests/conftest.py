"""Pytest fixtures: in-memory SQLite database and a FastAPI test client."""
from __future__ import annotations

import os
from typing import Generator

# Must be set before any unisandbox module builds the engine.
os.environ["UNISANDBOX_DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from unisandbox.core.db import Base, SessionLocal, engine
from unisandbox.models import user  # noqa: F401 - ensure models are registered
from unisandbox.repositories.user_repository import UserRepository


@pytest.fixture(autouse=True)
def fresh_tables() -> Generator[None, None, None]:
    """Every test starts from an empty user table."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def user_repository() -> UserRepository:
    return UserRepository()


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    from unisandbox.main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def alice() -> dict:
    return {"username": "alice", "gender": "f", "name": "Alice", "age": 30, "status": 1}
