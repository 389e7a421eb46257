"""Bookworm TUI screens."""

from .home import HomeScreen
from .about import AboutScreen
from .activity import ActivityScreen
from .browse import BrowseScreen
from .my_list import MyListScreen
from .reminder import ReminderScreen

__all__ = [
    "HomeScreen",
    "AboutScreen",
    "ActivityScreen",
    "BrowseScreen",
    "MyListScreen",
    "ReminderScreen",
]
