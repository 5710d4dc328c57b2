"""Book repository backed by the books table."""

from loguru import logger
from sqlalchemy import text
from sqlalchemy.exc import DBAPIError, IntegrityError, SQLAlchemyError
from sqlmodel import Session, select

from src.book_api.core.storage.book_store import (
    BookStore,
    BookStoreError,
    KeyConflictError,
)
from src.book_api.entities.service.book.entity import Book
from src.book_api.entities.service.book.table import BookTable


def _reason_phrase(exc: SQLAlchemyError) -> str:
    """Short human readable cause of a store failure."""
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        return str(exc.orig)
    return str(exc) or type(exc).__name__


class BookRepository(BookStore):
    """Data-access layer for books.

    All rows share one partition key, so lookups and deletes are addressed by
    ISBN alone.
    """

    def __init__(self, session: Session, partition_key: str = "") -> None:
        self._session = session
        self._partition_key = partition_key

    def ensure_table_exists(self) -> None:
        bind = self._session.get_bind()
        BookTable.__table__.create(bind, checkfirst=True)  # type: ignore[attr-defined]
        logger.info("Ensured table {} exists", BookTable.__tablename__)

    def _get_row(self, isbn: str) -> BookTable | None:
        statement = select(BookTable).where(
            (BookTable.partition_key == self._partition_key)
            & (BookTable.row_key == isbn)
        )
        return self._session.exec(statement).first()

    def list_all(self) -> list[Book]:
        statement = select(BookTable).where(
            BookTable.partition_key == self._partition_key
        )
        return [row.to_book() for row in self._session.exec(statement).all()]

    def get_by_key(self, isbn: str) -> Book | None:
        row = self._get_row(isbn)
        if row is None:
            return None
        return row.to_book()

    def insert(self, book: Book) -> None:
        row = BookTable.from_book(book, self._partition_key)
        try:
            self._session.add(row)
            self._session.commit()
        except IntegrityError as e:
            self._session.rollback()
            raise KeyConflictError(book.isbn) from e
        except SQLAlchemyError as e:
            self._session.rollback()
            logger.error(
                "Inserting book {} failed: {}", book.isbn, _reason_phrase(e)
            )
            raise BookStoreError(_reason_phrase(e)) from e

    def delete_by_key(self, isbn: str) -> bool:
        try:
            row = self._get_row(isbn)
            if row is None:
                return False
            self._session.delete(row)
            self._session.commit()
            return True
        except SQLAlchemyError as e:
            self._session.rollback()
            logger.error("Deleting book {} failed: {}", isbn, _reason_phrase(e))
            raise BookStoreError(_reason_phrase(e)) from e

    def is_available(self) -> bool:
        try:
            self._session.connection().execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            logger.error("Book table health check failed: {}", _reason_phrase(e))
            return False
