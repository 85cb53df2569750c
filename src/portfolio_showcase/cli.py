# ABOUTME: Operator CLI for the portfolio showcase backend using Typer.
# ABOUTME: Provides serve, init-db, status, messages, export and profile commands.

from datetime import UTC, datetime
from pathlib import Path
from typing import Annotated

import typer
import uvicorn
from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from sqlalchemy.exc import SQLAlchemyError

from portfolio_showcase.config import get_settings
from portfolio_showcase.database import DatabaseService
from portfolio_showcase.database.stats import get_database_stats
from portfolio_showcase.display import MessageTable, display_error, display_validation_error
from portfolio_showcase.export import CSVExporter
from portfolio_showcase.handlers import ContactMessageHandler, ProfileHandler
from portfolio_showcase.log import configure_logging
from portfolio_showcase.models import Profile
from portfolio_showcase.schemas import ProfileUpdate

app = typer.Typer(
    name="portfolio-showcase",
    help="Run and inspect the portfolio showcase backend.",
    add_completion=False,
)

console = Console()


def _open_database() -> DatabaseService:
    """Open the configured database, creating it if needed.

    Exits with code 1 after printing the error if the database cannot be opened.
    """
    settings = get_settings()
    db_service = DatabaseService(db_path=settings.db_path)
    try:
        db_service.init_db()
    except (OSError, SQLAlchemyError) as e:
        console.print(display_error(e, db_path=settings.db_path))
        raise typer.Exit(code=1) from None
    return db_service


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """Portfolio showcase backend.

    Serve the portfolio API and manage the data behind it.
    """
    if ctx.invoked_subcommand is None:
        console.print("[dim]Use --help to see available commands.[/dim]")


@app.command()
def serve(
    host: Annotated[
        str | None,
        typer.Option("--host", help="Interface to bind. Defaults to settings."),
    ] = None,
    port: Annotated[
        int | None,
        typer.Option("--port", "-p", help="Port to listen on. Defaults to settings."),
    ] = None,
    reload: Annotated[
        bool,
        typer.Option("--reload/--no-reload", help="Restart the server when code changes."),
    ] = False,
) -> None:
    """Start the HTTP API server."""
    settings = get_settings()
    configure_logging(settings.log_level)

    bind_host = host if host is not None else settings.host
    bind_port = port if port is not None else settings.port

    console.print(f"[green]Portfolio API listening on [bold]{bind_host}:{bind_port}[/bold][/green]")
    uvicorn.run(
        "portfolio_showcase.api.app:create_app",
        factory=True,
        host=bind_host,
        port=bind_port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


@app.command("init-db")
def init_db() -> None:
    """Create the database file and tables."""
    settings = get_settings()
    _open_database()
    console.print(f"[green]Database ready at[/green] [cyan]{settings.db_path}[/cyan]")


def _render_database_stats_panel(stats: dict[str, object]) -> Panel:
    """Render database statistics as a Rich Panel.

    Args:
        stats: Dictionary of database statistics from get_database_stats.

    Returns:
        Rich Panel containing formatted database statistics.
    """
    table = Table(show_header=False, box=None, padding=(0, 1))
    table.add_column("Label", style="dim")
    table.add_column("Value")

    table.add_row("Projects:", f"[cyan]{stats.get('total_projects', 0)}[/cyan]")
    table.add_row("Featured:", f"[cyan]{stats.get('featured_projects', 0)}[/cyan]")
    table.add_row("Skills:", f"[cyan]{stats.get('total_skills', 0)}[/cyan]")

    categories = stats.get("skill_categories") or []
    if isinstance(categories, list) and categories:
        table.add_row("Skill Categories:", ", ".join(str(c) for c in categories))

    table.add_row("Messages:", f"[cyan]{stats.get('total_messages', 0)}[/cyan]")

    latest = stats.get("latest_message_at")
    if isinstance(latest, datetime):
        table.add_row("Latest Message:", latest.strftime("%Y-%m-%d %H:%M:%S"))

    if stats.get("has_profile"):
        table.add_row("Profile:", "[green]Created[/green]")
    else:
        table.add_row("Profile:", "[yellow]Not set[/yellow]")

    return Panel(
        table,
        title="Database Statistics",
        border_style="blue",
        padding=(1, 2),
    )


@app.command()
def status() -> None:
    """Show counts of the stored projects, skills and messages."""
    db_service = _open_database()
    stats = get_database_stats(db_service)
    console.print(_render_database_stats_panel(stats))


@app.command()
def messages(
    limit: Annotated[
        int | None,
        typer.Option("--limit", "-n", min=1, help="Show only the newest N messages."),
    ] = None,
) -> None:
    """List contact messages, newest first."""
    db_service = _open_database()
    inbox = ContactMessageHandler(db_service).list_all(limit=limit)

    if not inbox:
        console.print("[yellow]No messages yet.[/yellow]")
        return

    console.print(MessageTable().render(inbox, title="Contact Messages"))
    console.print(f"[dim]{len(inbox)} message(s).[/dim]")


def _generate_default_export_path() -> Path:
    """Generate a default export file path with timestamp.

    Returns:
        Path to the default export file.
    """
    timestamp = datetime.now(UTC).strftime("%Y%m%d_%H%M%S")
    return Path(f"messages_export_{timestamp}.csv")


@app.command()
def export(
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output file path. Defaults to messages_export_{timestamp}.csv",
        ),
    ] = None,
) -> None:
    """Export contact messages to CSV."""
    db_service = _open_database()
    inbox = ContactMessageHandler(db_service).list_all()

    output_path = output if output is not None else _generate_default_export_path()
    result_path = CSVExporter().export(inbox, output_path)

    if not inbox:
        console.print("[yellow]No records to export.[/yellow]")
    else:
        console.print(f"[green]Exported {len(inbox)} record(s) to:[/green]")
    console.print(f"  [cyan]{result_path}[/cyan]")


def _render_profile_panel(profile: Profile) -> Panel:
    table = Table(show_header=False, box=None, padding=(0, 1))
    table.add_column("Field", style="dim")
    table.add_column("Value")

    for field in ProfileUpdate.model_fields:
        value = getattr(profile, field)
        table.add_row(f"{field}:", "[dim]-[/dim]" if value is None else str(value))

    return Panel(table, title="Profile", border_style="cyan", padding=(1, 2))


@app.command()
def profile(
    name: Annotated[str | None, typer.Option("--name", help="Display name.")] = None,
    title: Annotated[str | None, typer.Option("--title", help="Professional title.")] = None,
    bio: Annotated[str | None, typer.Option("--bio", help="Short biography.")] = None,
    email: Annotated[str | None, typer.Option("--email", help="Public email address.")] = None,
    location: Annotated[str | None, typer.Option("--location", help="Location.")] = None,
    website_url: Annotated[
        str | None, typer.Option("--website-url", help="Personal website URL.")
    ] = None,
) -> None:
    """Show the profile, or update it when any option is given."""
    db_service = _open_database()
    handler = ProfileHandler(db_service)

    supplied = {
        key: value
        for key, value in {
            "name": name,
            "title": title,
            "bio": bio,
            "email": email,
            "location": location,
            "website_url": website_url,
        }.items()
        if value is not None
    }

    if not supplied:
        current = handler.get()
        if current is None:
            console.print("[yellow]No profile yet. Pass options to create one.[/yellow]")
            return
        console.print(_render_profile_panel(current))
        return

    try:
        data = ProfileUpdate(**supplied)
    except ValidationError as e:
        console.print(display_validation_error(e))
        raise typer.Exit(code=1) from None

    console.print(_render_profile_panel(handler.update(data)))


if __name__ == "__main__":
    app()
