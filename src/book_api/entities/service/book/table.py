"""Book database table model."""

from src.book_api.entities.core._base import TableEntity
from src.book_api.entities.service.book.entity import Book


class BookTable(TableEntity, table=True):
    """Database persistence model for books.

    One row per book, keyed by ISBN (``row_key``) inside a single constant
    partition, so the table behaves as a flat map from ISBN to the remaining
    fields.
    """

    __tablename__ = "books"

    title: str
    author: str
    publish_year: int

    @classmethod
    def from_book(cls, book: Book, partition_key: str = "") -> "BookTable":
        return cls(
            partition_key=partition_key,
            row_key=book.isbn,
            title=book.title,
            author=book.author,
            publish_year=book.publish_year,
        )

    def to_book(self) -> Book:
        return Book(
            isbn=self.row_key,
            title=self.title,
            author=self.author,
            publishYear=self.publish_year,
        )
