"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import HTTPException, Request, Security
from fastapi.security import APIKeyHeader, APIKeyQuery
from loguru import logger
from pydantic import ValidationError

from src.book_api.api.http.app_data import ApplicationDependencies
from src.book_api.core.security import is_valid_function_key
from src.book_api.core.storage import BookStore
from src.book_api.entities.service.book import Book, BookRepository
from src.book_api.runtime.context import get_config

function_key_query = APIKeyQuery(
    name="code", scheme_name="function_key", auto_error=False
)
function_key_header = APIKeyHeader(
    name="x-functions-key", scheme_name="function_key_header", auto_error=False
)


def get_app_dependencies(request: Request) -> ApplicationDependencies:
    """Get the services wired at startup."""
    return request.app.state.app_dependencies


def get_book_store(request: Request) -> Iterator[BookStore]:
    """Yield the book store for the configured backend."""
    app_deps = get_app_dependencies(request)
    if app_deps.memory_store is not None:
        yield app_deps.memory_store
        return

    if app_deps.database_service is None:
        raise RuntimeError("No book store is configured")

    partition_key = get_config().storage.partition_key
    session = app_deps.database_service.get_session()
    try:
        yield BookRepository(session, partition_key=partition_key)
    finally:
        session.close()


async def require_function_key(
    query_key: str | None = Security(function_key_query),
    header_key: str | None = Security(function_key_header),
) -> None:
    """Reject the request unless it carries a configured function key."""
    auth_config = get_config().auth
    if not auth_config.enabled:
        return

    if is_valid_function_key(query_key, auth_config) or is_valid_function_key(
        header_key, auth_config
    ):
        return

    logger.warning("Rejected request without a valid function key")
    raise HTTPException(status_code=401, detail="Missing or invalid function key")


async def read_book_payload(request: Request) -> Book | None:
    """Parse the request body into a Book.

    Returns None when the body is absent, not JSON, JSON ``null`` or does not
    match the Book shape.
    """
    body = await request.body()
    if not body:
        return None

    try:
        return Book.model_validate_json(body)
    except ValidationError as e:
        logger.info("Rejected book payload with {} validation error(s)", e.error_count())
        return None
