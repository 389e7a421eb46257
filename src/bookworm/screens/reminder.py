"""Reminder screen for picking a book's return date.

Dismisses with the chosen ``date``, or ``None`` when cancelled.
"""

from datetime import date
from typing import Optional

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import Screen
from textual.widgets import Button, Footer, Input, Label, Static

from ..manager import EARLIEST_RETURN_DATE


def parse_return_date(raw: str) -> Optional[date]:
    """Parse a ``YYYY-MM-DD`` string.

    Parameters
    ----------
    raw : str
        Text typed by the user.

    Returns
    -------
    date or None
        The parsed date, or ``None`` if the text is not a valid date or
        is earlier than ``EARLIEST_RETURN_DATE``.
    """
    try:
        picked = date.fromisoformat(raw.strip())
    except ValueError:
        return None
    return picked if picked >= EARLIEST_RETURN_DATE else None


class ReminderScreen(Screen[Optional[date]]):
    """Date entry form for a single book.

    Parameters
    ----------
    title : str
        Title of the book the reminder is for.
    """

    BINDINGS = [
        Binding("ctrl+s", "save", "Save", priority=True),
        Binding("escape", "cancel", "Cancel"),
    ]

    def __init__(self, title: str) -> None:
        super().__init__()
        self._book_title = title

    def compose(self) -> ComposeResult:
        with Vertical(id="reminder-container"):
            yield Static(f"Return date for [bold]{self._book_title}[/bold]", id="reminder-heading")
            yield Static("", id="reminder-error")
            with Horizontal(classes="reminder-row"):
                yield Label("Return by       ", classes="reminder-label")
                yield Input(
                    value=date.today().isoformat(),
                    placeholder="YYYY-MM-DD",
                    id="reminder-date",
                )
            with Horizontal(id="reminder-buttons"):
                yield Button("Set reminder", id="reminder-save", variant="primary")
                yield Button("Cancel", id="reminder-cancel")
        yield Footer()

    def on_mount(self) -> None:
        self.query_one("#reminder-date", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Save on Enter in the date field."""
        self.action_save()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle Set reminder and Cancel button presses."""
        if event.button.id == "reminder-save":
            self.action_save()
        elif event.button.id == "reminder-cancel":
            self.action_cancel()

    def action_save(self) -> None:
        """Validate the date and close the screen with it."""
        raw = self.query_one("#reminder-date", Input).value
        picked = parse_return_date(raw)
        if picked is None:
            self.query_one("#reminder-error", Static).update(
                "[#c45a3a]Invalid date (use YYYY-MM-DD)[/#c45a3a]"
            )
            return
        self.dismiss(picked)

    def action_cancel(self) -> None:
        """Close the screen without a date."""
        self.dismiss(None)
