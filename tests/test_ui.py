import io

from rich.console import Console

from bookworm import ui
from bookworm.manager import to_epoch_millis
from bookworm.models import BookRecord

from conftest import days_ago

RED = "\x1b[31m"


def _capture(monkeypatch):
    out = io.StringIO()
    console = Console(file=out, force_terminal=True, color_system="standard", width=120)
    monkeypatch.setattr(ui, "console", console)
    return out


def test_book_table_flags_only_the_late_entry(monkeypatch):
    out = _capture(monkeypatch)
    late = BookRecord(
        title="Clean Code",
        author="Robert C. Martin",
        return_date_millis=to_epoch_millis(days_ago(12)),
    )
    undated = BookRecord(title="Clean Code", author="Robert C. Martin")

    ui.display_book_table([late, undated], late=[late])

    assert out.getvalue().count(RED) == 1


def test_book_table_empty(monkeypatch):
    out = _capture(monkeypatch)

    ui.display_book_table([])

    assert "Your list is empty." in out.getvalue()
