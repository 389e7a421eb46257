from datetime import date, timedelta

import pytest

from bookworm import activity_log
from bookworm.manager import MILLIS_PER_DAY, PersonalListManager, to_epoch_millis
from bookworm.models import BookRecord
from bookworm.storage import MemoryListStore

TODAY = date(2026, 10, 19)
# Noon, so whole-day differences to local midnights survive a DST shift
NOW = to_epoch_millis(TODAY) + MILLIS_PER_DAY // 2


def days_ago(days: int) -> date:
    return TODAY - timedelta(days=days)


@pytest.fixture(autouse=True)
def activity_log_path(tmp_path, monkeypatch):
    # Keep test runs out of the real ~/.bookworm directory
    path = tmp_path / "data" / "activity.log"
    monkeypatch.setattr(activity_log, "_LOG_PATH", path)
    return path


@pytest.fixture
def store():
    return MemoryListStore()


@pytest.fixture
def fines():
    return []


@pytest.fixture
def manager(store, fines):
    return PersonalListManager(store, on_fine_changed=fines.append, clock=lambda: NOW)


@pytest.fixture
def clean_code():
    return BookRecord(
        title="Clean Code",
        author="Robert C. Martin",
        cover_image_ref="clean_code",
        info_url="https://www.oreilly.com/library/view/clean-code/9780136083238/",
    )


@pytest.fixture
def effective_java():
    return BookRecord(
        title="Effective Java (3rd Edition)",
        author="Joshua Bloch",
        cover_image_ref="effective_java",
    )
