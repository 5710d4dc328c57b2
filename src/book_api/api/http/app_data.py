from dataclasses import dataclass

from src.book_api.core.services import DbSessionService, InMemoryBookStore


@dataclass
class ApplicationDependencies:
    """Process-wide services created at startup and dropped at shutdown.

    Exactly one of ``database_service`` and ``memory_store`` is set,
    depending on ``storage.backend``.
    """

    database_service: DbSessionService | None = None
    memory_store: InMemoryBookStore | None = None
