"""OpenAPI metadata for the book operations.

Kept apart from the handlers so the documentation can change without
touching request handling. Each entry is passed verbatim to the route
decorator.
"""

from typing import Any

from starlette.responses import Response

from src.book_api.api.http.schemas import ErrorModel
from src.book_api.entities.service.book import Book

BOOKS_TAG = "books"

BOOK_OPERATIONS: dict[str, dict[str, Any]] = {
    "listBooks": {
        "operation_id": "listBooks",
        "summary": "List Books",
        "description": "Get list of books.",
        "response_model": list[Book],
    },
    "getBook": {
        "operation_id": "getBook",
        "summary": "Get Book",
        "description": "Get a book by its ISBN.",
        "response_model": Book,
        "responses": {
            404: {"model": ErrorModel, "description": "No book for the ISBN"},
        },
    },
    "createBook": {
        "operation_id": "createBook",
        "summary": "Create Book",
        "description": "Create a new book in the backend.",
        "response_model": Book,
        "responses": {
            400: {"description": "Malformed payload or ISBN already exists"},
            500: {"model": ErrorModel, "description": "Table transaction failed"},
        },
        # The body is parsed by hand so malformed payloads map to a bare 400
        "openapi_extra": {
            "requestBody": {
                "required": True,
                "content": {
                    "application/json": {
                        "schema": Book.model_json_schema(by_alias=True),
                    }
                },
            }
        },
    },
    "deleteBook": {
        "operation_id": "deleteBook",
        "summary": "Delete Book",
        "description": "Delete a book by its ISBN.",
        "status_code": 204,
        "response_class": Response,
        "responses": {
            204: {"description": "Empty response if successful."},
            500: {"model": ErrorModel, "description": "Deletion failed"},
        },
    },
}
