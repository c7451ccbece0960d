"""Typer CLI host for the journal engine."""

from collections.abc import Callable
from datetime import date as Date

import logfire
import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from .carry_over import get_carry_over_doing_items, seed_day_with_carry_over
from .commands import strip_trailing_command
from .config import get_data_dir
from .dedupe import dedupe_date_blocks
from .document_parser import parse_days
from .mutators import (
    attach_child_task,
    delete_event,
    delete_event_subtask,
    move_doing_to_done,
    toggle_completion,
    update_section_for_date,
)
from .schemas import ParsedDay
from .storage import JournalRepo
from .templates import extract_dates_from_content, initial_template

# Load environment variables from .env file
load_dotenv()

# Keep logs out of the terminal output
logfire.configure(console=False, send_to_logfire=False)

app = typer.Typer(
    name="monofocus",
    help="Plain-text daily journal with events, tasks and notes",
)
console = Console()


def _open_repo() -> JournalRepo:
    repo = JournalRepo(get_data_dir())
    if not repo.is_initialized():
        typer.echo(
            "Error: Journal not initialized. Run 'monofocus init' first.", err=True
        )
        raise typer.Exit(1)
    return repo


def _apply(message: str, edit: Callable[[str], str]) -> None:
    """Load the journal, apply one edit, and commit if anything changed."""
    repo = _open_repo()
    content = repo.read()

    updated = edit(content)
    if updated == content:
        typer.echo("No changes made.")
        return

    sha = repo.save(updated, message)
    typer.echo(f"Updated: {message}")
    if sha:
        typer.echo(f"Commit: {sha[:8]}")


def _render_day(day: ParsedDay) -> Tree:
    tree = Tree(f"[bold]{day.date}[/bold]")
    for section in day.sections:
        branch = tree.add(f"[cyan]{escape(f'[{section.title}]')}[/cyan]")
        for item in section.items:
            mark = "[green]✓[/green]" if item.is_completed else "•"
            node = branch.add(f"{mark} {escape(item.display_text)}")
            for child in item.children:
                child_mark = "[green]✓[/green]" if child.is_completed else "-"
                node.add(f"{child_mark} {escape(child.display_text)}")
    return tree


@app.command()
def init() -> None:
    """Initialize the journal data directory with git tracking."""
    data_dir = get_data_dir()
    repo = JournalRepo(data_dir)
    repo.init(initial_template(Date.today()))

    typer.echo(f"Initialized journal at {repo.journal_path}")
    typer.echo("\nGet started:")
    typer.echo("  monofocus show")
    typer.echo("  monofocus new-day 2025-12-20")


@app.command()
def show(
    date: str = typer.Argument(None, help="Date to show (default: all days)"),
) -> None:
    """Show the parsed journal."""
    repo = _open_repo()
    days = parse_days(repo.read())
    if date:
        days = [day for day in days if day.date == date]

    if not days:
        typer.echo("No days found.")
        return

    for day in days:
        console.print(_render_day(day))


@app.command()
def dates() -> None:
    """List the dates in the journal, newest first."""
    repo = _open_repo()
    found = extract_dates_from_content(repo.read())
    if not found:
        typer.echo("No days found.")
        return
    for value in found:
        typer.echo(value)


@app.command("new-day")
def new_day(
    date: str = typer.Argument(..., help="Date to create (YYYY-MM-DD)"),
) -> None:
    """Create a day, carrying over unfinished DOING items."""
    _apply(f"Add day {date}", lambda content: seed_day_with_carry_over(content, date))


@app.command("carry-over")
def carry_over(date: str) -> None:
    """Show the DOING items that would be carried into DATE."""
    repo = _open_repo()
    items = get_carry_over_doing_items(repo.read(), date)
    if not items:
        typer.echo("Nothing to carry over.")
        return
    for item in items:
        typer.echo(item)


@app.command("set-section")
def set_section(
    date: str,
    section: str = typer.Argument(..., help="Section label, e.g. EVENTS"),
    items: list[str] = typer.Argument(None, help="Lines to write"),
) -> None:
    """Replace the lines of one section of a day."""
    label = section.strip("[]")
    _apply(
        f"Set [{label}] for {date}",
        lambda content: update_section_for_date(content, date, label, items or []),
    )


@app.command("add-subtask")
def add_subtask(date: str, event: str, task: str) -> None:
    """Attach a subtask to an event and add it to DOING."""
    _apply(
        f"Add subtask '{task}' on {date}",
        lambda content: attach_child_task(content, date, event, task),
    )


@app.command()
def toggle(line: str) -> None:
    """Toggle the completion marker of a line (exact text)."""
    _apply(f"Toggle '{line.strip()}'", lambda content: toggle_completion(content, line))


@app.command()
def done(date: str, line: str) -> None:
    """Move a DOING line to DONE."""
    line = strip_trailing_command(line)
    _apply(
        f"Done '{line.strip()}' on {date}",
        lambda content: move_doing_to_done(content, date, line),
    )


@app.command("delete-event")
def delete_event_command(date: str, event: str) -> None:
    """Delete an event and its subtasks."""
    _apply(
        f"Delete event '{event.strip()}' on {date}",
        lambda content: delete_event(content, date, event),
    )


@app.command("delete-subtask")
def delete_subtask_command(date: str, subtask: str) -> None:
    """Delete an event subtask and its DOING mirror."""
    _apply(
        f"Delete subtask '{subtask.strip()}' on {date}",
        lambda content: delete_event_subtask(content, date, subtask),
    )


@app.command()
def dedupe() -> None:
    """Merge duplicate date headers."""
    _apply("Merge duplicate days", dedupe_date_blocks)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
