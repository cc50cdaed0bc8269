#!/usr/bin/env python3
"""
Notes CLI.

Terminal client for a running notes backend.
Built with Typer for type-safe commands and Rich for formatted output.

Usage:
    python cli.py --help                                   # Show help
    python cli.py notes list                               # List notes
    python cli.py notes show <id>                          # Show one note
    python cli.py notes add -t Groceries -c "milk, eggs"   # Create a note
    python cli.py notes edit <id> --color blue             # Update a note
    python cli.py notes rm <id>                            # Delete a note

Options:
    --verbose, -v     Enable verbose output
    --debug           Enable debug mode (detailed logging)
    --help            Show help message
"""

import sys
from pathlib import Path

import structlog
import typer
from rich.console import Console

# Add project root to path for absolute imports
project_root = Path(__file__).resolve().parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from notesapp.backend.core.logging import setup_logging
from notesapp.cli.commands import notes_app

app = typer.Typer(
    name="cli",
    help="Notes CLI - list, show, add, edit and remove notes.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()

app.add_typer(notes_app, name="notes")


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output (INFO level logging)",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug mode (DEBUG level logging)",
    ),
) -> None:
    """
    Notes CLI.

    Talks to the backend configured in config/settings/application.yaml.
    """
    if not (project_root / ".project_root").exists():
        console.print("[red]Error: .project_root not found. Run from project root.[/red]")
        raise typer.Exit(1)

    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    else:
        level = "WARNING"
    setup_logging(level=level, format_type="console")
    structlog.contextvars.bind_contextvars(source="cli")

    if debug:
        console.print("[dim]Debug mode enabled[/dim]")


if __name__ == "__main__":
    app()
