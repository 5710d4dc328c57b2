"""Table provisioning for the book store."""

from loguru import logger

from src.book_api.core.services.database.db_session import DbSessionService
from src.book_api.entities.service.book import BookRepository
from src.book_api.runtime.context import get_config


class DbManageService:
    def __init__(self, database_service: DbSessionService | None = None):
        self._database_service = database_service or DbSessionService()

    def create_all(self) -> None:
        """Create the books table if it does not exist yet."""
        partition_key = get_config().storage.partition_key
        with self._database_service.session_scope() as session:
            BookRepository(session, partition_key=partition_key).ensure_table_exists()
        logger.info("Database initialized with tables.")
