from __future__ import annotations

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import StaticPool
from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine

from src.book_api.runtime.context import get_config

_FUNCTION_KEY = "test-function-key"


@pytest.fixture
def function_key() -> str:
    return _FUNCTION_KEY


@pytest.fixture
def route_prefix() -> str:
    return get_config().app.route_prefix


@pytest.fixture
def engine() -> Generator[Engine]:
    """Create a fresh in-memory engine with the books table."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Import models to register them with the metadata
    from src.book_api.entities.service.book.table import BookTable  # noqa: F401

    SQLModel.metadata.create_all(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def session(engine: Engine) -> Generator[Session]:
    """Create a fresh database session for testing."""
    with Session(engine) as session:
        try:
            yield session
        finally:
            session.rollback()


@pytest.fixture
def client(function_key: str) -> Generator[TestClient]:
    """Test client running the full lifespan against a fresh in-memory table.

    Every request carries the function key in the ``x-functions-key`` header.
    """
    from src.book_api.api.http.app import app

    headers = {"x-functions-key": function_key}
    with TestClient(app, headers=headers) as test_client:
        yield test_client


@pytest.fixture
def anonymous_client() -> Generator[TestClient]:
    """Test client that sends no function key."""
    from src.book_api.api.http.app import app

    with TestClient(app) as test_client:
        yield test_client
