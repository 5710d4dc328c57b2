"""Main CLI application module."""

import typer

from .book_commands import books_app
from .dev_commands import dev_app

# Create the main CLI application
app = typer.Typer(
    help="📚 Book API CLI - database and development tool",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Register command groups
app.add_typer(books_app, name="books")
app.add_typer(dev_app, name="dev")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
