"""Rich UI components for the Bookworm CLI."""

from typing import Iterable

from rich.console import Console
from rich.table import Table

from .models import BookRecord

console = Console()


def print_success(message: str) -> None:
    """Print a success message with checkmark."""
    console.print(f"[green]✓[/green] {message}")


def print_skip(message: str) -> None:
    """Print a skip message with circle."""
    console.print(f"[dim]○[/dim] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]✗[/red] {message}")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[dim]{message}[/dim]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]![/yellow] {message}")


def format_return_date(book: BookRecord) -> str:
    """Return the reminder date as ``YYYY-MM-DD``, or ``-`` when unset."""
    return_date = book.return_date
    return return_date.isoformat() if return_date else "-"


def display_catalog(books: Iterable[BookRecord]) -> None:
    """Display the catalogue with a row number per book."""
    table = Table(show_header=True, header_style="dim", box=None, padding=(0, 2))
    table.add_column("#", style="dim", justify="right")
    table.add_column("Title", style="white", no_wrap=False, max_width=50)
    table.add_column("Author", style="dim", no_wrap=False, max_width=30)

    for number, book in enumerate(books, 1):
        table.add_row(str(number), book.display_title(50), book.display_author(30))

    console.print(table)


def display_book_table(books: Iterable[BookRecord], late: Iterable[BookRecord] = ()) -> None:
    """Display the personal list.

    Books in *late* get their return date highlighted.
    """
    late_ids = {id(book) for book in late}
    table = Table(show_header=True, header_style="dim", box=None, padding=(0, 2))
    table.add_column("#", style="dim", justify="right")
    table.add_column("Title", style="white", no_wrap=False, max_width=50)
    table.add_column("Author", style="dim", no_wrap=False, max_width=30)
    table.add_column("Return by", style="cyan", no_wrap=True)

    count = 0
    for number, book in enumerate(books, 1):
        return_by = format_return_date(book)
        if id(book) in late_ids:
            return_by = f"[red]{return_by}[/red]"
        table.add_row(
            str(number),
            book.display_title(50),
            book.display_author(30),
            return_by,
        )
        count += 1

    if count == 0:
        print_info("Your list is empty.")
        return
    console.print(table)


def display_fine(total: int) -> None:
    """Print the total fine line."""
    style = "red" if total else "green"
    console.print(f"Total fine: [bold {style}]${total}[/bold {style}]")


def display_late_warnings(books: Iterable[BookRecord]) -> None:
    """Print one warning per late book."""
    for book in books:
        print_warning(f"Late return: {book.title}")
