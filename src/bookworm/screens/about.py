"""About screen showing logo, version, and configuration path."""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.screen import Screen
from textual.widgets import Footer, Static

from .. import __version__

LOGO = """\
 _                 _
| |__   ___   ___ | | ____      _____  _ __ _ __ ___
| '_ \\ / _ \\ / _ \\| |/ /\\ \\ /\\ / / _ \\| '__| '_ ` _ \\
| |_) | (_) | (_) |   <  \\ V  V / (_) | |  | | | | | |
|_.__/ \\___/ \\___/|_|\\_\\  \\_/\\_/ \\___/|_|  |_| |_| |_|"""


class AboutScreen(Screen):
    """About dialog with logo, version, and config path."""

    BINDINGS = [
        Binding("escape", "go_back", "Back"),
    ]

    def compose(self) -> ComposeResult:
        """Display the logo, version, and config path."""
        yield Static(
            f"[#d4a04a]{LOGO}[/#d4a04a]\n\n"
            f"v. {__version__}    YOUR READING LIST AND RETURN REMINDERS\n\n"
            f"[#8a7e6a]Books 10 or more days late cost a flat $10 each.[/#8a7e6a]\n\n"
            f"Configuration file: ~/.bookworm/bookworm-settings.json",
            id="about-panel",
        )
        yield Footer()

    def action_go_back(self) -> None:
        """Return to the home screen."""
        self.app.pop_screen()
