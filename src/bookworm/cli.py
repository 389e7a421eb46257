"""CLI entry point for Bookworm."""

from datetime import datetime
from pathlib import Path
from typing import Optional

import click

from . import ui
from .catalog import find_catalog_book, get_available_books
from .manager import EARLIEST_RETURN_DATE, Outcome, PersonalListManager
from .settings import Settings, load_settings, open_store


def _settings(ctx: click.Context) -> Settings:
    return load_settings(ctx.obj.get("settings_path"))


def _open_manager(ctx: click.Context) -> PersonalListManager:
    """Build a list manager on the configured store."""
    return PersonalListManager(open_store(_settings(ctx)), source="cli")


def _fail(ctx: click.Context, message: str) -> None:
    ui.print_error(message)
    ctx.exit(1)


@click.group(invoke_without_command=True)
@click.option(
    "--settings",
    "settings_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Settings file (defaults to ~/.bookworm/bookworm-settings.json)",
)
@click.pass_context
def main(ctx: click.Context, settings_path: Optional[Path]) -> None:
    """Bookworm - browse books and track your reading list."""
    ctx.ensure_object(dict)
    ctx.obj["settings_path"] = settings_path
    if ctx.invoked_subcommand is None:
        ctx.invoke(tui_cmd)


@main.command("tui")
@click.pass_context
def tui_cmd(ctx: click.Context) -> None:
    """Start the interactive terminal app."""
    from .app import BookwormApp

    BookwormApp(settings=_settings(ctx)).run()


@main.command("catalog")
def catalog_cmd() -> None:
    """List the books available to borrow."""
    ui.display_catalog(get_available_books())


@main.command("list")
@click.pass_context
def list_cmd(ctx: click.Context) -> None:
    """Show your list with return dates and the total fine."""
    settings = _settings(ctx)
    manager = PersonalListManager(open_store(settings), source="cli")
    late = manager.late_books()

    ui.display_book_table(manager.books, late=late)
    if manager.books:
        ui.display_fine(manager.total_fine())
    if settings.late_warnings:
        ui.display_late_warnings(late)


@main.command("add")
@click.argument("title")
@click.pass_context
def add_cmd(ctx: click.Context, title: str) -> None:
    """Add a catalogue book to your list by TITLE."""
    book = find_catalog_book(title)
    if book is None:
        _fail(ctx, f"No catalogue book titled: {title}")

    result = _open_manager(ctx).add_book(book)
    if result.outcome is Outcome.ADDED:
        ui.print_success(f"Added to My List: {book.title}")
    else:
        ui.print_skip("This book is already in your list.")


@main.command("remind")
@click.argument("index", type=int)
@click.argument("return_date", metavar="DATE", type=click.DateTime(formats=["%Y-%m-%d"]))
@click.pass_context
def remind_cmd(ctx: click.Context, index: int, return_date: datetime) -> None:
    """Set the return DATE (YYYY-MM-DD) of book number INDEX."""
    if return_date.date() < EARLIEST_RETURN_DATE:
        raise click.BadParameter(
            f"must be on or after {EARLIEST_RETURN_DATE}", param_hint="DATE"
        )
    manager = _open_manager(ctx)
    result = manager.set_return_date(index - 1, return_date.date())

    if result.outcome is Outcome.INDEX_OUT_OF_RANGE:
        _fail(ctx, f"No book number {index} in your list.")
    elif result.outcome is Outcome.ALREADY_HAS_DATE:
        ui.print_skip("A reminder is already set for this book.")
    else:
        ui.print_success("Reminder saved. We'll warn you if you're late.")
        ui.display_fine(result.total_fine)


@main.command("return")
@click.argument("index", type=int)
@click.pass_context
def return_cmd(ctx: click.Context, index: int) -> None:
    """Return book number INDEX and remove it from your list."""
    manager = _open_manager(ctx)
    result = manager.return_book(index - 1)

    if result.outcome is Outcome.INDEX_OUT_OF_RANGE:
        _fail(ctx, f"No book number {index} in your list.")
    ui.print_success("Book returned and removed from your list.")
    ui.display_fine(result.total_fine)


@main.command("fine")
@click.pass_context
def fine_cmd(ctx: click.Context) -> None:
    """Show the total late-return fine."""
    ui.display_fine(_open_manager(ctx).total_fine())


@main.command("late")
@click.pass_context
def late_cmd(ctx: click.Context) -> None:
    """List books past their return date."""
    late = _open_manager(ctx).late_books()
    if not late:
        ui.print_info("No late books.")
        return
    ui.display_late_warnings(late)


if __name__ == "__main__":
    main()
