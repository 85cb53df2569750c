# ABOUTME: Error display helpers for formatting error messages with Rich.
# ABOUTME: Panels for rejected input and for database files that cannot be opened.

import traceback
from pathlib import Path

from pydantic import ValidationError
from rich.panel import Panel
from rich.text import Text


def display_error(error: Exception, db_path: Path | None = None, verbose: bool = False) -> Panel:
    """Format a failure to open or use the database as a Rich Panel.

    Args:
        error: The exception to display.
        db_path: Database file involved, shown so the operator can check it.
        verbose: If True, append the traceback.

    Returns:
        A Rich Panel naming the exception and, when known, the database path.
    """
    content = Text()
    content.append(f"{type(error).__name__}: ", style="bold red")
    content.append(str(error), style="red")

    if db_path is not None:
        content.append("\n\nDatabase: ", style="dim")
        content.append(str(db_path), style="cyan")
        content.append("\nSet PORTFOLIO_DB_PATH to use a different file.", style="dim")

    if verbose:
        content.append("\n\nTraceback:\n", style="dim")
        content.append(
            "".join(traceback.format_exception(type(error), error, error.__traceback__)),
            style="dim",
        )

    return Panel(content, title="Error", border_style="red", padding=(1, 2))


def display_validation_error(error: ValidationError) -> Panel:
    """Display each failed field of a validation error on its own line.

    Args:
        error: The pydantic ValidationError to display.

    Returns:
        A Rich Panel listing field locations and messages.
    """
    message = Text()
    message.append("The input was rejected:\n\n", style="bold red")
    for item in error.errors(include_url=False):
        location = ".".join(str(part) for part in item["loc"]) or "input"
        message.append(f"• {location}: ", style="bold")
        message.append(f"{item['msg']}\n", style="yellow")

    return Panel(
        message,
        title="Invalid Input",
        border_style="yellow",
        padding=(1, 2),
    )
