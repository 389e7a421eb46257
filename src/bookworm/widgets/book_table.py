"""Book table widget that keeps rows in list order and reports positions."""

from typing import Iterable, Optional

from rich.text import Text
from textual.message import Message
from textual.widgets import DataTable, Static

from ..models import BookRecord

# Column key -> (label, share of the terminal width, minimum width)
_COLUMNS = {
    "title": ("Title", 0.45, 30),
    "author": ("Author", 0.30, 20),
    "return_by": ("Return by", 0.12, 10),
    "status": ("Status", 0.13, 10),
}

_CATALOG_COLUMNS = ("title", "author")


class BookTable(Static):
    """DataTable wrapper whose row positions match the book sequence.

    Parameters
    ----------
    show_dates : bool, optional
        Add the return date and status columns (for the personal list).
    """

    class BookSelected(Message):
        """Emitted when a book row is selected."""

        def __init__(self, index: int) -> None:
            self.index = index
            super().__init__()

    def __init__(self, *args, show_dates: bool = False, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._show_dates = show_dates
        self._columns_added = False
        self._row_index: dict = {}  # row_key -> position in the sequence

    def compose(self):
        yield DataTable()

    def on_mount(self) -> None:
        table = self.query_one(DataTable)
        table.cursor_type = "row"

    def _column_keys(self) -> tuple[str, ...]:
        return tuple(_COLUMNS) if self._show_dates else _CATALOG_COLUMNS

    def _ensure_columns(self) -> None:
        """Add columns sized to the terminal width."""
        if self._columns_added:
            return
        self._columns_added = True
        table = self.query_one(DataTable)
        width = self.app.size.width - 2
        keys = self._column_keys()
        scale = 1 / sum(_COLUMNS[key][1] for key in keys)
        self._widths = {}
        for key in keys:
            label, share, minimum = _COLUMNS[key]
            self._widths[key] = max(minimum, int(width * share * scale))
            table.add_column(label, width=self._widths[key], key=key)

    def load_books(
        self,
        books: Iterable[BookRecord],
        late: Iterable[BookRecord] = (),
    ) -> None:
        """Replace the table rows with *books*, keeping the cursor row.

        Parameters
        ----------
        books : iterable of BookRecord
            Books in display order.
        late : iterable of BookRecord, optional
            Books to flag as late in the status column.
        """
        table = self.query_one(DataTable)
        self._ensure_columns()
        cursor = table.cursor_row
        table.clear()
        self._row_index.clear()

        late_ids = {id(book) for book in late}
        title_max = self._widths["title"]
        author_max = self._widths["author"]
        for index, book in enumerate(books):
            cells = [book.display_title(title_max), book.display_author(author_max)]
            if self._show_dates:
                cells.extend(self._date_cells(book, id(book) in late_ids))
            row_key = table.add_row(*cells)
            self._row_index[row_key] = index

        if table.row_count:
            table.move_cursor(row=min(cursor, table.row_count - 1))

    @staticmethod
    def _date_cells(book: BookRecord, is_late: bool) -> list:
        if not book.has_return_date:
            return ["", Text("no reminder", style="dim")]
        return_by = book.return_date.isoformat()
        if is_late:
            return [return_by, Text("late", style="bold #c45a3a")]
        return [return_by, Text("reminder set", style="#6a9a4a")]

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        """Forward row selection as BookSelected message."""
        index = self._row_index.get(event.row_key)
        if index is not None:
            self.post_message(self.BookSelected(index))

    def get_selected_index(self) -> Optional[int]:
        """Return the position of the highlighted row, or ``None`` if empty."""
        table = self.query_one(DataTable)
        if table.row_count == 0:
            return None
        return table.cursor_row

    def focus_table(self) -> None:
        """Move keyboard focus to the inner ``DataTable``."""
        self.query_one(DataTable).focus()
