"""Core services exports."""

from src.book_api.core.storage.book_store import (
    BookStore,
    BookStoreError,
    InMemoryBookStore,
    KeyConflictError,
)

from .database.db_manage import DbManageService
from .database.db_session import DbSessionService

__all__ = [
    # Book storage
    "BookStore",
    "BookStoreError",
    "InMemoryBookStore",
    "KeyConflictError",
    # Database
    "DbManageService",
    "DbSessionService",
]
