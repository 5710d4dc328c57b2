"""Book storage abstractions."""

from .book_store import BookStore, BookStoreError, InMemoryBookStore, KeyConflictError

__all__ = ["BookStore", "BookStoreError", "InMemoryBookStore", "KeyConflictError"]
