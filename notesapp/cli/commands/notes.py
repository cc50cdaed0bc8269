"""
Note Commands.

List, show, add, edit and remove notes on a running backend.
"""

import asyncio
from enum import Enum
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from notesapp.backend.core.config import get_app_config
from notesapp.backend.schemas.note import NOTE_COLORS
from notesapp.client.actions import ClientNote, NotesActions
from notesapp.client.hook import NotesHook
from notesapp.client.http import APIClient

app = typer.Typer(help="Note commands")
console = Console()

Color = Enum("Color", {color: color for color in NOTE_COLORS}, type=str)

# Palette tokens as Rich color names
STYLES = {
    "gray": "grey50",
    "red": "red",
    "orange": "orange1",
    "yellow": "yellow",
    "green": "green",
    "blue": "blue",
    "indigo": "slate_blue1",
    "purple": "purple",
    "pink": "pink1",
}


def _style(color: str) -> str:
    return STYLES.get(color, "white")


def _hook() -> tuple[NotesHook, APIClient]:
    client = APIClient(frontend="cli")
    actions = NotesActions(client, api_prefix=get_app_config().application.api_prefix)
    return NotesHook(actions), client


def _fail(hook: NotesHook) -> None:
    console.print(f"[red]Error: {hook.error}[/red]")
    raise typer.Exit(1)


def _render_note(note: ClientNote) -> None:
    console.print(Panel(
        note.content,
        title=f"[bold {_style(note.color)}]{note.title}[/]",
        subtitle=f"[dim]{note.id} | updated {note.updated_at:%Y-%m-%d %H:%M:%S}[/dim]",
    ))


@app.command("list")
def list_notes() -> None:
    """
    List notes, most recently updated first.

    Examples:
        cli.py notes list
    """
    asyncio.run(_list())


async def _list() -> None:
    hook, client = _hook()
    try:
        if not await hook.refresh():
            _fail(hook)
    finally:
        await client.close()

    if not hook.notes:
        console.print("[dim]No notes yet[/dim]")
        return

    table = Table(title="Notes", show_header=True)
    table.add_column("ID", style="dim")
    table.add_column("Title", style="bold")
    table.add_column("Color")
    table.add_column("Updated")

    for note in hook.notes:
        table.add_row(
            note.id,
            note.title,
            f"[{_style(note.color)}]{note.color}[/]",
            f"{note.updated_at:%Y-%m-%d %H:%M}",
        )

    console.print(table)


@app.command()
def show(note_id: str = typer.Argument(..., help="Note ID")) -> None:
    """Show a single note."""
    asyncio.run(_show(note_id))


async def _show(note_id: str) -> None:
    hook, client = _hook()
    try:
        note = await hook.get(note_id)
    finally:
        await client.close()

    if note is None:
        _fail(hook)
    _render_note(note)


@app.command()
def add(
    title: str = typer.Option(..., "--title", "-t", prompt=True, help="Note title"),
    content: str = typer.Option(..., "--content", "-c", prompt=True, help="Note content"),
    color: Color = typer.Option(Color.gray, "--color", help="Note color"),
) -> None:
    """
    Create a note.

    Examples:
        cli.py notes add -t Groceries -c "milk, eggs" --color green
    """
    asyncio.run(_add(title, content, color.value))


async def _add(title: str, content: str, color: str) -> None:
    hook, client = _hook()
    try:
        note = await hook.create(title, content, color)
    finally:
        await client.close()

    if note is None:
        _fail(hook)
    console.print(f"[green]Created note {note.id}[/green]")
    _render_note(note)


@app.command()
def edit(
    note_id: str = typer.Argument(..., help="Note ID"),
    title: Optional[str] = typer.Option(None, "--title", "-t", help="New title"),
    content: Optional[str] = typer.Option(None, "--content", "-c", help="New content"),
    color: Optional[Color] = typer.Option(None, "--color", help="New color"),
) -> None:
    """
    Update some fields of a note. Omitted options keep their values.

    Examples:
        cli.py notes edit <id> --color blue
    """
    asyncio.run(_edit(note_id, title, content, color.value if color else None))


async def _edit(
    note_id: str,
    title: Optional[str],
    content: Optional[str],
    color: Optional[str],
) -> None:
    hook, client = _hook()
    try:
        note = await hook.update(note_id, title=title, content=content, color=color)
    finally:
        await client.close()

    if note is None:
        _fail(hook)
    console.print(f"[green]Updated note {note.id}[/green]")
    _render_note(note)


@app.command()
def rm(
    note_id: str = typer.Argument(..., help="Note ID"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """
    Delete a note. Asks for confirmation unless --yes is given.

    Examples:
        cli.py notes rm <id>
    """
    if not yes:
        typer.confirm(f"Delete note {note_id}?", abort=True)
    asyncio.run(_rm(note_id))


async def _rm(note_id: str) -> None:
    hook, client = _hook()
    try:
        deleted = await hook.delete(note_id)
    finally:
        await client.close()

    if not deleted:
        _fail(hook)
    console.print(f"[green]Deleted note {note_id}[/green]")
