"""Activity logging for changes to the personal list.

Every successful add, reminder and return is appended to a JSON Lines
file in ``~/.bookworm/data/activity.log`` by both the TUI and the CLI.
"""

import fcntl
import json
from dataclasses import asdict, dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Optional

_BOOKWORM_DIR = Path.home() / ".bookworm"
_LOG_PATH = _BOOKWORM_DIR / "data" / "activity.log"

ACTIONS = ("add", "remind", "return")
SOURCES = ("tui", "cli")


@dataclass
class ActivityEntry:
    """A single activity log entry.

    Attributes
    ----------
    timestamp : str
        ISO 8601 timestamp with microseconds.
    action : str
        One of ``add``, ``remind`` or ``return``.
    source : str
        Either ``tui`` or ``cli``.
    title : str or None
        Book title when applicable.
    details : dict
        Action-specific data.
    """

    timestamp: str
    action: str
    source: str
    title: Optional[str] = None
    details: dict = field(default_factory=dict)


def get_log_path() -> Path:
    """Return the path to the activity log file."""
    return _LOG_PATH


def log_activity(
    action: str,
    source: str,
    title: Optional[str] = None,
    **details,
) -> None:
    """Append an activity entry to the log file.

    Uses POSIX file locking so the TUI and CLI processes can write to the
    same file.

    Parameters
    ----------
    action : str
        The action type (``add``, ``remind``, ``return``).
    source : str
        The source of the action (``tui`` or ``cli``).
    title : str, optional
        Book title when applicable.
    **details
        Action-specific data to include in the log entry.
    """
    entry = ActivityEntry(
        timestamp=datetime.now().isoformat(),
        action=action,
        source=source,
        title=title,
        details=details,
    )

    log_path = get_log_path()
    log_path.parent.mkdir(parents=True, exist_ok=True)

    line = json.dumps(asdict(entry), ensure_ascii=False) + "\n"

    with open(log_path, "a", encoding="utf-8") as f:
        fcntl.flock(f.fileno(), fcntl.LOCK_EX)
        try:
            f.write(line)
        finally:
            fcntl.flock(f.fileno(), fcntl.LOCK_UN)


def _parse_line(line: str) -> Optional[ActivityEntry]:
    """Decode one log line, or return ``None`` if it is blank or invalid."""
    line = line.strip()
    if not line:
        return None
    try:
        return ActivityEntry(**json.loads(line))
    except (json.JSONDecodeError, TypeError):
        return None


def read_recent_activity(
    limit: int = 100, action: str = "", source: str = ""
) -> list[ActivityEntry]:
    """Read the most recent activity entries from the log.

    Parameters
    ----------
    limit : int
        Maximum number of entries to return.
    action : str, optional
        Only return entries with this action; empty means all.
    source : str, optional
        Only return entries from this source; empty means all.

    Returns
    -------
    list of ActivityEntry
        Matching entries, most recent first.
    """
    log_path = get_log_path()
    if not log_path.exists():
        return []

    entries = []
    with open(log_path, "r", encoding="utf-8") as f:
        fcntl.flock(f.fileno(), fcntl.LOCK_SH)
        try:
            for line in f:
                entry = _parse_line(line)
                if entry is None:
                    continue
                if action and entry.action != action:
                    continue
                if source and entry.source != source:
                    continue
                entries.append(entry)
        finally:
            fcntl.flock(f.fileno(), fcntl.LOCK_UN)

    entries.sort(key=lambda e: e.timestamp, reverse=True)
    return entries[:limit]
