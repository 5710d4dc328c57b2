"""Book store interface and implementations.

Provides a unified interface for persisting books keyed by ISBN, with a
table-backed implementation (see ``BookRepository``) and an in-memory one
for local runs and demos.
"""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from src.book_api.entities.service.book.entity import Book


class BookStoreError(Exception):
    """Raised when the store fails to carry out an operation."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class KeyConflictError(BookStoreError):
    """Raised when inserting a book whose ISBN is already stored."""

    def __init__(self, isbn: str) -> None:
        super().__init__(f"A book with isbn {isbn} already exists")
        self.isbn = isbn


class BookStore(ABC):
    """Abstract interface for book storage backends."""

    @abstractmethod
    def ensure_table_exists(self) -> None:
        """Create the backing storage if it does not exist yet. Idempotent."""
        pass

    @abstractmethod
    def list_all(self) -> list[Book]:
        """Return every stored book, in no particular order."""
        pass

    @abstractmethod
    def get_by_key(self, isbn: str) -> Book | None:
        """Return the book stored under ``isbn`` or None if there is none."""
        pass

    @abstractmethod
    def insert(self, book: Book) -> None:
        """Store a new book.

        Raises:
            KeyConflictError: a book with the same ISBN already exists
            BookStoreError: the write failed
        """
        pass

    @abstractmethod
    def delete_by_key(self, isbn: str) -> bool:
        """Delete the book stored under ``isbn``.

        Deleting a missing key is not an error.

        Returns:
            True if a book was removed

        Raises:
            BookStoreError: the delete failed
        """
        pass

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the storage backend is reachable."""
        pass


class InMemoryBookStore(BookStore):
    """Process-local book store.

    State lives for as long as the instance does; the application creates one
    at startup and drops it at shutdown.
    """

    def __init__(self, books: Iterable[Book] = ()) -> None:
        self._data: dict[str, Book] = {}
        self._lock = threading.Lock()
        for book in books:
            self._data[book.isbn] = book.model_copy()

    def ensure_table_exists(self) -> None:
        logger.debug("In-memory book store needs no provisioning")

    def list_all(self) -> list[Book]:
        with self._lock:
            return [book.model_copy() for book in self._data.values()]

    def get_by_key(self, isbn: str) -> Book | None:
        with self._lock:
            book = self._data.get(isbn)
        return book.model_copy() if book is not None else None

    def insert(self, book: Book) -> None:
        with self._lock:
            if book.isbn in self._data:
                raise KeyConflictError(book.isbn)
            self._data[book.isbn] = book.model_copy()

    def delete_by_key(self, isbn: str) -> bool:
        with self._lock:
            return self._data.pop(isbn, None) is not None

    def is_available(self) -> bool:
        return True
