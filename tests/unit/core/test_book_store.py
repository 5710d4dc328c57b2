"""Unit tests for the in-memory book store."""

import pytest

from src.book_api.core.storage import (
    BookStore,
    BookStoreError,
    InMemoryBookStore,
    KeyConflictError,
)
from src.book_api.entities.service.book import Book


def _book(isbn: str = "111", **overrides) -> Book:
    fields = {"isbn": isbn, "title": "A", "author": "B", "publishYear": 2020}
    fields.update(overrides)
    return Book(**fields)


class TestInMemoryBookStore:
    """Test the process-local BookStore implementation."""

    def test_is_a_book_store(self):
        """Should implement the BookStore interface."""
        assert isinstance(InMemoryBookStore(), BookStore)

    def test_empty_store_lists_nothing(self):
        """Should list no books when nothing was stored."""
        assert InMemoryBookStore().list_all() == []

    def test_seeded_books_are_listed(self, sample_book):
        """Should expose the books passed at construction."""
        store = InMemoryBookStore([sample_book])

        assert store.list_all() == [sample_book]
        assert store.get_by_key(sample_book.isbn) == sample_book

    def test_insert_then_get(self):
        """Should return an equal book after inserting it."""
        store = InMemoryBookStore()
        book = _book()

        store.insert(book)

        assert store.get_by_key("111") == book

    def test_get_missing_returns_none(self):
        """Should return None for an ISBN that was never stored."""
        assert InMemoryBookStore().get_by_key("missing") is None

    def test_insert_duplicate_raises_key_conflict(self):
        """Should refuse a second book with the same ISBN and keep the first."""
        store = InMemoryBookStore([_book(title="Original")])

        with pytest.raises(KeyConflictError) as exc_info:
            store.insert(_book(title="Replacement"))

        assert exc_info.value.isbn == "111"
        assert isinstance(exc_info.value, BookStoreError)
        assert store.get_by_key("111").title == "Original"

    def test_delete_existing_book(self):
        """Should remove the book and report that it did."""
        store = InMemoryBookStore([_book()])

        assert store.delete_by_key("111") is True
        assert store.get_by_key("111") is None
        assert store.list_all() == []

    def test_delete_missing_book_is_not_an_error(self):
        """Should report False when deleting an unknown ISBN."""
        assert InMemoryBookStore().delete_by_key("missing") is False

    def test_returned_books_are_copies(self):
        """Should not let callers mutate stored state through returned books."""
        store = InMemoryBookStore([_book()])

        fetched = store.get_by_key("111")
        fetched.title = "Changed"

        assert store.get_by_key("111").title == "A"

    def test_ensure_table_exists_is_idempotent(self):
        """Should tolerate repeated provisioning."""
        store = InMemoryBookStore()
        store.ensure_table_exists()
        store.ensure_table_exists()

        assert store.is_available() is True


class TestBookStoreErrors:
    """Test the store exception types."""

    def test_book_store_error_keeps_reason(self):
        """Should carry the failure reason as an attribute and message."""
        error = BookStoreError("connection reset")

        assert error.reason == "connection reset"
        assert str(error) == "connection reset"

    def test_key_conflict_names_isbn(self):
        """Should mention the conflicting ISBN in its reason."""
        error = KeyConflictError("111")

        assert "111" in error.reason
