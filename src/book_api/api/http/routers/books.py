"""Book API router: list, get, create and delete books by ISBN."""

from fastapi import APIRouter, Depends
from loguru import logger
from starlette.responses import JSONResponse, Response

from src.book_api.api.http.deps import (
    get_book_store,
    read_book_payload,
    require_function_key,
)
from src.book_api.api.http.openapi import BOOK_OPERATIONS, BOOKS_TAG
from src.book_api.api.http.schemas import error_response
from src.book_api.core.storage import BookStore, BookStoreError, KeyConflictError
from src.book_api.entities.service.book import Book

router = APIRouter(tags=[BOOKS_TAG], dependencies=[Depends(require_function_key)])


@router.get("/book", **BOOK_OPERATIONS["listBooks"])
def list_books(store: BookStore = Depends(get_book_store)) -> list[Book]:
    """List all books."""
    logger.info("Processing request for list books endpoint.")
    return store.list_all()


@router.get("/book/{isbn}", **BOOK_OPERATIONS["getBook"])
def get_book(
    isbn: str,
    store: BookStore = Depends(get_book_store),
) -> Book | JSONResponse:
    """Get a book by its ISBN."""
    logger.info(
        "Processing request to get specific book by its isbn with the isbn {}.", isbn
    )

    book = store.get_by_key(isbn)
    if book is None:
        return error_response(
            404,
            "BookNotFound",
            "There was no book found for the provided isbn.",
        )
    return book


@router.post("/book", **BOOK_OPERATIONS["createBook"])
def create_book(
    book: Book | None = Depends(read_book_payload),
    store: BookStore = Depends(get_book_store),
) -> Book | Response:
    """Create a new book and echo it back.

    Malformed payloads and duplicate ISBNs get a 400 without a body.
    """
    logger.info("Processing request for create book endpoint.")

    if book is None:
        return Response(status_code=400)

    # Check-then-insert is not atomic; the primary key catches the race below
    if store.get_by_key(book.isbn) is not None:
        logger.info("Book with isbn {} already exists", book.isbn)
        return Response(status_code=400)

    try:
        store.insert(book)
    except KeyConflictError:
        logger.info("Book with isbn {} was created concurrently", book.isbn)
        return Response(status_code=400)
    except BookStoreError:
        return error_response(
            500,
            "TableTransactionError",
            "There was a problem executing the table transaction.",
        )

    return book


@router.delete("/book/{isbn}", **BOOK_OPERATIONS["deleteBook"])
def delete_book(
    isbn: str,
    store: BookStore = Depends(get_book_store),
) -> Response:
    """Delete a book by its ISBN; deleting an unknown ISBN also succeeds."""
    logger.info(
        "Processing request to delete specific book by its isbn with the isbn {}.", isbn
    )

    try:
        store.delete_by_key(isbn)
    except BookStoreError as e:
        return error_response(
            500,
            "BookDeletionError",
            f"There was an error deleting the book with isbn {isbn}: {e.reason}.",
        )

    return Response(status_code=204)
