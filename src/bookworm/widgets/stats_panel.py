"""Stats panel widget displaying a summary of the personal list.

Shows the application version, the preferences file, the number of books
in the list, how many are late, and the total fine.
"""

from textual.widgets import Static


class StatsPanel(Static):
    """Single-line stats bar at the top of the home and list screens."""

    def update_stats(
        self,
        version: str,
        prefs_path: str,
        book_count: int,
        late_count: int,
        total_fine: int,
    ) -> None:
        """Refresh the stats bar content.

        Parameters
        ----------
        version : str
            Application version string (e.g. ``"0.1.0"``).
        prefs_path : str
            Display path of the preferences file.
        book_count : int
            Number of books in the personal list.
        late_count : int
            Number of books past their return date.
        total_fine : int
            Current total fine in dollars.
        """
        fine = f"[#c45a3a]${total_fine}[/#c45a3a]" if total_fine else "$0"
        self.update(
            f"[bold]Bookworm {version}[/bold]  |  {prefs_path}  |  "
            f"{book_count} books, {late_count} late  |  "
            f"total fine: {fine}"
        )
