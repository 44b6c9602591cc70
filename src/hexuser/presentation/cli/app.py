"""hexuser CLI application using Typer.

This module provides command-line utilities for the hexuser service:
running the API server and managing the database schema and demo data.
"""

import asyncio
from typing import Optional

import typer
import uvicorn
from rich.console import Console

from hexuser.infrastructure.persistence.sqlalchemy.init_db import (
    create_tables,
    drop_tables,
)
from hexuser_config.settings import get_settings

app = typer.Typer(
    name="hexuser",
    help="hexuser - hexagonal user service CLI",
    no_args_is_help=True,
)
console = Console()


# Create db subcommand group
db_app = typer.Typer(
    name="db",
    help="Database schema and demo data utilities",
    no_args_is_help=True,
)
app.add_typer(db_app)


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address (default: API_HOST)"),
    port: Optional[int] = typer.Option(None, help="Bind port (default: API_PORT)"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the HTTP API with uvicorn."""
    settings = get_settings()
    host = host or settings.api_host
    port = port or settings.api_port

    console.print(
        f"[bold green]Starting {settings.app_name} API[/bold green] "
        f"on [cyan]http://{host}:{port}[/cyan] "
        f"([dim]{settings.database_type}[/dim])"
    )
    uvicorn.run(
        "hexuser.presentation.api.app:app",
        host=host,
        port=port,
        reload=reload,
        log_config=None,  # the app configures logging itself
    )


@db_app.command("init")
def db_init() -> None:
    """Create missing database tables (idempotent)."""
    asyncio.run(create_tables())
    console.print("[green]Database schema is up to date.[/green]")


@db_app.command("drop")
def db_drop(
    yes: bool = typer.Option(False, "--yes", help="Skip the confirmation prompt"),
) -> None:
    """Drop all database tables."""
    if not yes:
        typer.confirm("This deletes all users. Continue?", abort=True)

    asyncio.run(drop_tables())
    console.print("[yellow]All tables dropped.[/yellow]")


@db_app.command("seed")
def db_seed() -> None:
    """Insert demo users that are not present yet."""
    from hexuser_demo.seed import main as seed_main

    seed_main()
    console.print("[green]Demo data seeded.[/green]")


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
