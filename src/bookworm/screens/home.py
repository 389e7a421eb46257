"""Home screen with the list summary and navigation.

This is the default screen shown on launch. Keys: ``b`` browse the
catalogue, ``m`` my list, ``l`` activity log, ``a`` about, ``q`` quit.
"""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import Screen
from textual.widgets import Footer, Static

from .. import __version__
from ..widgets.stats_panel import StatsPanel

MENU = """\
[bold]Welcome to Bookworm[/bold]

  [#d4a04a]b[/#d4a04a]  Browse books
  [#d4a04a]m[/#d4a04a]  My list
  [#d4a04a]l[/#d4a04a]  Activity log
  [#d4a04a]a[/#d4a04a]  About"""


class HomeScreen(Screen):
    """Landing screen linking to the catalogue and the personal list."""

    BINDINGS = [
        Binding("b", "browse", "Browse"),
        Binding("m", "my_list", "My list"),
        Binding("l", "activity", "Activity"),
        Binding("a", "about", "About"),
        Binding("q", "quit", "Quit"),
    ]

    def compose(self) -> ComposeResult:
        """Build the screen layout: stats, menu, footer."""
        yield StatsPanel()
        with Vertical(id="home-container"):
            yield Static(MENU, id="home-menu")
        yield Footer()

    def on_mount(self) -> None:
        self.watch(self.app, "total_fine", self._on_total_fine, init=False)
        self._refresh_stats()

    def on_screen_resume(self) -> None:
        """Refresh the summary when returning from another screen."""
        self.app.manager.refresh()
        self.app.total_fine = self.app.manager.total_fine()
        self._refresh_stats()

    def _on_total_fine(self, total: int) -> None:
        self._refresh_stats()

    def _refresh_stats(self) -> None:
        """Update the stats panel from the list manager."""
        manager = self.app.manager
        prefs = self.app.settings.prefs_name + ".json"
        self.query_one(StatsPanel).update_stats(
            __version__,
            prefs,
            len(manager),
            len(manager.late_books()),
            self.app.total_fine,
        )

    def action_browse(self) -> None:
        """Push the catalogue screen (bound to ``b``)."""
        from .browse import BrowseScreen
        self.app.push_screen(BrowseScreen())

    def action_my_list(self) -> None:
        """Push the personal list screen (bound to ``m``)."""
        from .my_list import MyListScreen
        self.app.push_screen(MyListScreen())

    def action_activity(self) -> None:
        """Push the activity log screen (bound to ``l``)."""
        from .activity import ActivityScreen
        self.app.push_screen(ActivityScreen())

    def action_about(self) -> None:
        """Push the about screen (bound to ``a``)."""
        from .about import AboutScreen
        self.app.push_screen(AboutScreen())

    def action_quit(self) -> None:
        """Exit the application (bound to ``q``)."""
        self.app.exit()
