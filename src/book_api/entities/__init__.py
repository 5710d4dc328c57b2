"""Entities module with an entity-centric structure.

Each entity has its own package containing:
- entity.py: Domain model exchanged with API clients
- table.py: Database persistence model
- repository.py: Data access layer
"""

from .service.book import Book, BookRepository, BookTable

__all__ = [
    "Book",
    "BookTable",
    "BookRepository",
]
