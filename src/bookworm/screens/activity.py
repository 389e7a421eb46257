"""Activity log screen for browsing recent changes to the list.

Displays a DataTable of recent activity log entries with filtering options
by action type and source.
"""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import Screen
from textual.widgets import DataTable, Footer, Select, Static

from ..activity_log import ACTIONS, SOURCES, ActivityEntry, read_recent_activity

_ACTION_CHOICES = [("All actions", "")] + [(a.capitalize(), a) for a in ACTIONS]
_SOURCE_CHOICES = [("All sources", "")] + [(s.upper(), s) for s in SOURCES]


def format_details(entry: ActivityEntry) -> str:
    """Format the details dict for display.

    Parameters
    ----------
    entry : ActivityEntry
        The activity entry.

    Returns
    -------
    str
        A concise summary of the details.
    """
    d = entry.details
    if not d:
        return "-"

    parts = []
    if entry.action == "add":
        if "author" in d:
            parts.append(f"by {d['author']}")
    elif entry.action == "remind":
        if "return_date" in d:
            parts.append(f"due {d['return_date']}")
        if "total_fine" in d:
            parts.append(f"fine ${d['total_fine']}")
    elif entry.action == "return":
        if "total_fine" in d:
            parts.append(f"fine ${d['total_fine']}")

    result = ", ".join(parts) if parts else "-"
    if len(result) > 40:
        result = result[:37] + "..."
    return result


class ActivityScreen(Screen):
    """Activity log browser with filters for action type and source.

    Attributes
    ----------
    _entries : list of ActivityEntry
        Entries matching the current filters.
    _action_filter : str
        Current action filter (empty string = all).
    _source_filter : str
        Current source filter (empty string = all).
    """

    BINDINGS = [
        Binding("escape", "go_back", "Back"),
        Binding("r", "refresh", "Refresh"),
    ]

    def __init__(self) -> None:
        super().__init__()
        self._entries: list[ActivityEntry] = []
        self._action_filter = ""
        self._source_filter = ""

    def compose(self) -> ComposeResult:
        """Build the activity screen layout."""
        with Vertical(id="activity-container"):
            yield Static("[bold]Activity Log[/bold]", id="activity-title")
            with Horizontal(id="activity-filters"):
                yield Static("Action:", classes="filter-label")
                yield Select(
                    _ACTION_CHOICES,
                    value="",
                    id="activity-action-filter",
                    allow_blank=False,
                )
                yield Static("Source:", classes="filter-label")
                yield Select(
                    _SOURCE_CHOICES,
                    value="",
                    id="activity-source-filter",
                    allow_blank=False,
                )
            yield DataTable(id="activity-table", cursor_type="row")
        yield Footer()

    def on_mount(self) -> None:
        """Set up the table columns and load activity entries."""
        table = self.query_one("#activity-table", DataTable)
        table.add_columns("Time", "Action", "Source", "Title", "Details")
        self._load_entries()

    def _load_entries(self) -> None:
        """Load matching activity entries from the log file."""
        self._entries = read_recent_activity(
            limit=200, action=self._action_filter, source=self._source_filter
        )
        self._refresh_table()

    def _refresh_table(self) -> None:
        """Refresh the table with the loaded entries."""
        table = self.query_one("#activity-table", DataTable)
        table.clear()

        for entry in self._entries:
            # Date and time without microseconds
            ts = entry.timestamp.split(".")[0].replace("T", " ")

            title = entry.title or "-"
            if len(title) > 35:
                title = title[:32] + "..."

            table.add_row(
                ts,
                entry.action.capitalize(),
                entry.source.upper(),
                title,
                format_details(entry),
            )

    def on_select_changed(self, event: Select.Changed) -> None:
        """Handle filter dropdown changes."""
        if event.select.id == "activity-action-filter":
            self._action_filter = event.value if event.value else ""
            self._load_entries()
        elif event.select.id == "activity-source-filter":
            self._source_filter = event.value if event.value else ""
            self._load_entries()

    def action_refresh(self) -> None:
        """Reload activity entries from disk (bound to ``r``)."""
        self._load_entries()
        self.notify("Activity log refreshed")

    def action_go_back(self) -> None:
        """Pop this screen and return to the home screen."""
        self.app.pop_screen()
