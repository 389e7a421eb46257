import json
from dataclasses import asdict

from bookworm.activity_log import ActivityEntry, get_log_path, log_activity, read_recent_activity
from bookworm.manager import PersonalListManager
from bookworm.screens.activity import format_details

from conftest import NOW, days_ago


def test_read_without_log_is_empty():
    assert read_recent_activity() == []


def test_log_activity_appends_json_lines(activity_log_path):
    log_activity("add", "cli", title="Clean Code", author="Robert C. Martin")

    assert get_log_path() == activity_log_path
    [line] = activity_log_path.read_text().splitlines()
    data = json.loads(line)
    assert data["action"] == "add"
    assert data["source"] == "cli"
    assert data["title"] == "Clean Code"
    assert data["details"] == {"author": "Robert C. Martin"}


def test_recent_activity_newest_first_and_limited(activity_log_path):
    activity_log_path.parent.mkdir(parents=True)
    with open(activity_log_path, "w", encoding="utf-8") as f:
        for minute, title in ((1, "one"), (3, "three"), (2, "two")):
            entry = ActivityEntry(f"2026-10-19T10:0{minute}:00", "add", "tui", title=title)
            f.write(json.dumps(asdict(entry)) + "\n")

    entries = read_recent_activity(limit=2)

    assert [e.title for e in entries] == ["three", "two"]


def test_bad_lines_are_skipped(activity_log_path):
    log_activity("return", "tui", title="Clean Code", total_fine=0)
    with open(activity_log_path, "a", encoding="utf-8") as f:
        f.write("not json\n\n")
        f.write(json.dumps({"unexpected": True}) + "\n")

    assert [e.action for e in read_recent_activity()] == ["return"]


def test_manager_logs_each_change(store, clean_code, activity_log_path):
    manager = PersonalListManager(store, clock=lambda: NOW, source="cli")
    manager.add_book(clean_code)
    manager.add_book(clean_code)
    manager.set_return_date(0, days_ago(11))
    manager.set_return_date(0, days_ago(1))
    manager.return_book(0)
    manager.return_book(0)

    lines = activity_log_path.read_text().splitlines()
    entries = [ActivityEntry(**json.loads(line)) for line in lines]

    assert [e.action for e in entries] == ["add", "remind", "return"]
    assert all(e.source == "cli" for e in entries)
    assert entries[1].details == {
        "return_date": days_ago(11).isoformat(),
        "total_fine": 10,
    }
    assert entries[2].details == {"total_fine": 0}


def test_format_details():
    remind = ActivityEntry(
        timestamp="2026-10-19T10:00:00",
        action="remind",
        source="tui",
        title="Clean Code",
        details={"return_date": "2026-10-08", "total_fine": 10},
    )
    assert format_details(remind) == "due 2026-10-08, fine $10"
    assert format_details(ActivityEntry("2026-10-19T10:00:00", "add", "tui")) == "-"


def test_read_recent_activity_filters():
    log_activity("add", "tui", title="Clean Code")
    log_activity("add", "cli", title="Effective Java (3rd Edition)")
    log_activity("return", "cli", title="Clean Code", total_fine=0)

    assert [e.title for e in read_recent_activity(source="cli", action="add")] == [
        "Effective Java (3rd Edition)"
    ]
    assert {e.action for e in read_recent_activity(source="cli")} == {"add", "return"}
    assert read_recent_activity(action="remind") == []
