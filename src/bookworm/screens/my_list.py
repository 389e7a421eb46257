"""Personal list screen with reminders, returns and the total fine.

Keys: ``r`` set a return-date reminder, ``x`` return the book, Escape to
go back. Late books are announced each time the screen is shown.
"""

from datetime import date
from typing import Optional

from textual.app import ComposeResult
from textual.binding import Binding
from textual.screen import Screen
from textual.widgets import Footer, Static

from ..manager import Outcome
from ..widgets.book_table import BookTable


class MyListScreen(Screen):
    """The user's books with their return dates and the total fine."""

    BINDINGS = [
        Binding("r", "set_reminder", "Set reminder"),
        Binding("x", "return_book", "Return book"),
        Binding("escape", "go_back", "Back"),
    ]

    def compose(self) -> ComposeResult:
        yield Static("[bold]My list[/bold]", id="list-title")
        yield BookTable(show_dates=True, id="list-table")
        yield Static("", id="list-empty")
        yield Static("", id="total-fine")
        yield Footer()

    def on_mount(self) -> None:
        self.watch(self.app, "total_fine", self._show_fine)
        self._reload(warn=False)
        self.query_one(BookTable).focus_table()

    def on_screen_resume(self) -> None:
        """Reload the list and warn about late books."""
        self._reload(warn=self.app.settings.late_warnings)

    def _reload(self, warn: bool) -> None:
        """Re-read the list from the store and redraw it.

        Parameters
        ----------
        warn : bool
            Show a notification for every late book.
        """
        manager = self.app.manager
        manager.refresh()
        self.app.total_fine = manager.total_fine()
        self._render_list()
        if warn:
            for book in manager.late_books():
                self.notify(f"Late return: {book.title}", severity="warning", timeout=6)

    def _render_list(self) -> None:
        manager = self.app.manager
        self.query_one(BookTable).load_books(manager.books, late=manager.late_books())
        empty = ""
        if not len(manager):
            empty = "[#8a7e6a]Your list is empty. Browse the catalogue to add books.[/#8a7e6a]"
        self.query_one("#list-empty", Static).update(empty)

    def _show_fine(self, total: int) -> None:
        self.query_one("#total-fine", Static).update(f"Total fine: ${total}")

    def action_set_reminder(self) -> None:
        """Ask for a return date for the highlighted book (bound to ``r``)."""
        index = self.query_one(BookTable).get_selected_index()
        if index is None:
            return
        book = self.app.manager.books[index]
        if book.has_return_date:
            self.notify("A reminder is already set for this book.")
            return

        def on_date(picked: Optional[date]) -> None:
            if picked is not None:
                self._apply_reminder(index, picked)

        from .reminder import ReminderScreen
        self.app.push_screen(ReminderScreen(book.title), on_date)

    def _apply_reminder(self, index: int, picked: date) -> None:
        result = self.app.manager.set_return_date(index, picked)
        if result.outcome is Outcome.UPDATED:
            self.notify("Reminder saved. We'll warn you if you're late.")
        elif result.outcome is Outcome.ALREADY_HAS_DATE:
            self.notify("A reminder is already set for this book.")
        self._render_list()

    def action_return_book(self) -> None:
        """Return the highlighted book and drop it from the list (bound to ``x``)."""
        index = self.query_one(BookTable).get_selected_index()
        if index is None:
            return
        result = self.app.manager.return_book(index)
        if result.outcome is Outcome.REMOVED:
            self.notify("Book returned and removed from your list.")
        self._render_list()

    def action_go_back(self) -> None:
        self.app.pop_screen()
