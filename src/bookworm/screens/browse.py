"""Browse screen listing the catalogue.

Enter or ``a`` adds the highlighted book to the personal list.
"""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.screen import Screen
from textual.widgets import DataTable, Footer, Static

from ..catalog import get_available_books
from ..manager import Outcome
from ..models import BookRecord
from ..widgets.book_table import BookTable


def _format_book_summary(book: BookRecord) -> str:
    """Format the highlighted book as Rich markup."""
    lines = [f"[bold]{book.title}[/bold]"]
    if book.author:
        lines.append(f"[#8a7e6a]by[/#8a7e6a] {book.author}")
    if book.info_url:
        lines.append(f"[#8a7e6a]{book.info_url}[/#8a7e6a]")
    return "\n".join(lines)


class BrowseScreen(Screen):
    """Catalogue table with an add-to-list action."""

    BINDINGS = [
        Binding("a", "add_book", "Add to list"),
        Binding("escape", "go_back", "Back"),
    ]

    def __init__(self) -> None:
        super().__init__()
        self._books = get_available_books()

    def compose(self) -> ComposeResult:
        yield Static("[bold]Available books[/bold]", id="browse-title")
        yield BookTable(id="browse-table")
        yield Static("", id="browse-panel")
        yield Footer()

    def on_mount(self) -> None:
        book_table = self.query_one(BookTable)
        book_table.load_books(self._books)
        book_table.focus_table()
        self._show_summary(0)

    def on_data_table_row_highlighted(self, event: DataTable.RowHighlighted) -> None:
        """Show details of the highlighted book."""
        self._show_summary(event.cursor_row)

    def _show_summary(self, index: int) -> None:
        if 0 <= index < len(self._books):
            self.query_one("#browse-panel", Static).update(
                _format_book_summary(self._books[index])
            )

    def on_book_table_book_selected(self, event: BookTable.BookSelected) -> None:
        """Add the book chosen with Enter."""
        self._add(event.index)

    def action_add_book(self) -> None:
        """Add the highlighted book (bound to ``a``)."""
        index = self.query_one(BookTable).get_selected_index()
        if index is not None:
            self._add(index)

    def _add(self, index: int) -> None:
        result = self.app.manager.add_book(self._books[index])
        if result.outcome is Outcome.ADDED:
            self.notify("Added to My List!")
        else:
            self.notify("This book is already in your list.", severity="warning")

    def action_go_back(self) -> None:
        self.app.pop_screen()
