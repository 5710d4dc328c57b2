"""Development CLI commands."""

import json

import typer
import uvicorn
from rich.panel import Panel
from rich.syntax import Syntax

from src.book_api.core.security import generate_function_key, mask_secret
from src.book_api.runtime.context import get_config

from .utils import console

dev_app = typer.Typer(help="🚀 Development commands")


@dev_app.command(name="start-server")
def start_server(
    host: str | None = typer.Option(
        None, help="Host to bind the server to [default: app.host]"
    ),
    port: int | None = typer.Option(
        None, help="Port to bind the server to [default: app.port]"
    ),
    reload: bool = typer.Option(True, help="Enable auto-reload on code changes"),
    log_level: str = typer.Option(
        "info", help="Log level (debug, info, warning, error, critical)"
    ),
) -> None:
    """
    🚀 Start the FastAPI development server.

    Runs the Book API under uvicorn with hot reloading.
    """
    console.print(
        Panel.fit(
            "[bold green]Starting Book API Development Server[/bold green]",
            border_style="green",
        )
    )
    app_config = get_config().app
    if host is None:
        host = app_config.host
    if port is None:
        port = app_config.port
    prefix = app_config.route_prefix
    console.print(
        f"[blue]Server will be available at:[/blue] http://{host}:{port}{prefix}/book"
    )
    console.print("[dim]Press Ctrl+C to stop the server[/dim]")

    uvicorn.run(
        "src.book_api.api.http.app:app",
        host=host,
        port=port,
        reload=reload,
        reload_dirs=["src"] if reload else None,
        log_level=log_level,
    )


@dev_app.command(name="show-config")
def show_config() -> None:
    """Print the effective configuration with secrets masked."""
    config = get_config()
    data = config.model_dump(mode="json", exclude={"database": {"password"}})
    data["auth"]["function_keys"] = [
        mask_secret(key) for key in config.auth.function_keys
    ]
    data["database"]["connection_string"] = config.database.url

    console.print(Syntax(json.dumps(data, indent=2), "json"))


@dev_app.command(name="generate-key")
def generate_key(
    length: int = typer.Option(32, help="Number of random bytes in the key"),
) -> None:
    """Generate a new function key for the auth.function_keys setting."""
    console.print(generate_function_key(length))
