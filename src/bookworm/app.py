"""Textual TUI application for Bookworm.

Defines the ``BookwormApp`` class (the Textual ``App`` subclass). The
``bookworm`` console script starts it when run without a subcommand.
"""

from pathlib import Path
from typing import Optional

from textual.app import App
from textual.reactive import reactive

from .manager import PersonalListManager
from .settings import Settings, load_settings, open_store
from .storage import PersonalListStore


class BookwormApp(App):
    """Bookworm reading list TUI.

    Builds the list manager on mount and pushes the initial ``HomeScreen``.
    Screens watch ``total_fine``, which the manager updates through its
    fine listener.

    Parameters
    ----------
    list_store : PersonalListStore, optional
        List store to use instead of the one described by the settings.
    settings : Settings, optional
        Settings to use instead of loading the settings file.

    Attributes
    ----------
    settings : Settings
        Settings in use, loaded on mount unless passed in.
    manager : PersonalListManager
        Owner of the personal list, available after mount.
    """

    TITLE = "Bookworm"
    SUB_TITLE = "My Reading List"
    CSS_PATH = Path(__file__).parent / "bookworm.tcss"

    BINDINGS = [
        ("q", "quit", "Quit"),
    ]

    total_fine = reactive(0)

    def __init__(
        self,
        list_store: Optional[PersonalListStore] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        super().__init__()
        self._list_store = list_store
        self.settings = settings

    def on_mount(self) -> None:
        """Load settings, build the list manager, and push the home screen."""
        if self.settings is None:
            self.settings = load_settings()
        store = self._list_store
        if store is None:
            store = open_store(self.settings)
        self.manager = PersonalListManager(
            store, on_fine_changed=self._on_fine_changed, source="tui"
        )
        self.total_fine = self.manager.total_fine()
        from .screens.home import HomeScreen
        self.push_screen(HomeScreen())

    def _on_fine_changed(self, total: int) -> None:
        self.total_fine = total

