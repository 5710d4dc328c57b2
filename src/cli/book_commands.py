"""Book table CLI commands."""

import typer
from rich.table import Table
from sqlalchemy.exc import SQLAlchemyError

from src.book_api.core.services import DbManageService, DbSessionService
from src.book_api.entities.service.book import BookRepository
from src.book_api.runtime.context import get_config

from .utils import console

books_app = typer.Typer(help="📚 Manage the books table")


@books_app.command("init-db")
def init_db() -> None:
    """Create the books table if it does not exist yet."""
    config = get_config()
    console.print(f"[blue]Database:[/blue] {config.database.url}")

    try:
        DbManageService().create_all()
    except SQLAlchemyError as e:
        console.print(f"[red]❌ Failed to create the books table: {e}[/red]")
        raise typer.Exit(code=1) from e

    console.print("[green]✅ Books table is ready[/green]")


@books_app.command("list")
def list_books() -> None:
    """List every book stored in the books table."""
    config = get_config()
    database_service = DbSessionService()

    try:
        with database_service.session_scope() as session:
            books = BookRepository(
                session, partition_key=config.storage.partition_key
            ).list_all()
    except SQLAlchemyError as e:
        console.print(f"[red]❌ Failed to read books: {e}[/red]")
        raise typer.Exit(code=1) from e
    finally:
        database_service.dispose()

    if not books:
        console.print("[yellow]No books stored[/yellow]")
        return

    table = Table(title="Books")
    table.add_column("ISBN", style="cyan")
    table.add_column("Title", style="green")
    table.add_column("Author", style="blue")
    table.add_column("Year", style="magenta", justify="right")

    for book in books:
        table.add_row(book.isbn, book.title, book.author, str(book.publish_year))

    console.print(table)
    console.print(f"\n[dim]Total: {len(books)} book(s)[/dim]")
