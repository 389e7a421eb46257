"""Personal list management and late-return fines.

``PersonalListManager`` owns the canonical copy of the user's list. Views
get read-only snapshots through ``books`` and change the list only by
calling the manager, which writes the whole list back to the store after
every change.

Fine rule: a book whose return date lies 10 or more whole days in the past
adds a flat $10. Whole days are counted by truncating the millisecond
difference, not by comparing calendar dates.
"""

import time
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Callable, Iterable, Optional

from .activity_log import log_activity
from .models import BookRecord
from .storage import PersonalListStore

MILLIS_PER_DAY = 86_400_000
FINE_THRESHOLD_DAYS = 10
FINE_PER_BOOK = 10

# Earliest day whose local midnight is a positive timestamp in every zone
EARLIEST_RETURN_DATE = date(1970, 1, 2)


class Outcome(Enum):
    """Result of a list operation."""

    ADDED = "added"
    ALREADY_EXISTS = "already_exists"
    UPDATED = "updated"
    ALREADY_HAS_DATE = "already_has_date"
    REMOVED = "removed"
    INDEX_OUT_OF_RANGE = "index_out_of_range"


_CHANGED = {Outcome.ADDED, Outcome.UPDATED, Outcome.REMOVED}


@dataclass(frozen=True)
class ListResult:
    """Outcome of a list operation and, after a change, the new total fine.

    Attributes
    ----------
    outcome : Outcome
        What happened.
    total_fine : int or None
        Total fine after ``UPDATED`` or ``REMOVED``; ``None`` otherwise.
    """

    outcome: Outcome
    total_fine: Optional[int] = None

    @property
    def ok(self) -> bool:
        """Whether the list was changed."""
        return self.outcome in _CHANGED


def now_millis() -> int:
    """Return the current time as epoch milliseconds."""
    return time.time_ns() // 1_000_000


def to_epoch_millis(day: date) -> int:
    """Return local midnight of *day* as epoch milliseconds.

    Parameters
    ----------
    day : date or datetime
        The calendar day. The time part of a ``datetime`` is dropped.

    Returns
    -------
    int
        Milliseconds since the epoch at 00:00:00.000 local time.

    Raises
    ------
    ValueError
        If *day* is earlier than ``EARLIEST_RETURN_DATE``.
    """
    if isinstance(day, datetime):
        day = day.date()
    if day < EARLIEST_RETURN_DATE:
        raise ValueError(f"Return date must be on or after {EARLIEST_RETURN_DATE}")
    midnight = datetime(day.year, day.month, day.day)
    return int(midnight.timestamp()) * 1000


def _whole_days(diff_millis: int) -> int:
    """Truncate a millisecond difference to whole days, toward zero."""
    days = abs(diff_millis) // MILLIS_PER_DAY
    return days if diff_millis >= 0 else -days


def calculate_total_fine(books: Iterable[BookRecord], now: int) -> int:
    """Return the total late fine in dollars.

    Parameters
    ----------
    books : iterable of BookRecord
        The personal list.
    now : int
        Current time in epoch milliseconds.

    Returns
    -------
    int
        ``FINE_PER_BOOK`` for every book at least ``FINE_THRESHOLD_DAYS``
        whole days past its return date. Books without a date are never
        fined.
    """
    total = 0
    for book in books:
        if not book.has_return_date:
            continue
        if _whole_days(now - book.return_date_millis) >= FINE_THRESHOLD_DAYS:
            total += FINE_PER_BOOK
    return total


def find_late_books(books: Iterable[BookRecord], now: int) -> list[BookRecord]:
    """Return books whose return date has passed, in list order."""
    return [
        book for book in books
        if book.has_return_date and now > book.return_date_millis
    ]


class PersonalListManager:
    """Business operations on the personal list.

    Parameters
    ----------
    store : PersonalListStore
        Where the list is loaded from and saved to.
    on_fine_changed : callable, optional
        Called with the new total fine after a return date is set or a
        book is returned.
    clock : callable, optional
        Returns the current time in epoch milliseconds. Defaults to
        ``now_millis``.
    source : str, optional
        Activity-log source tag (``tui`` or ``cli``).

    Notes
    -----
    Each mutation is saved to the store before it is written to the
    activity log. An ``OSError`` from the log write reaches the caller
    with the change already saved and, for reminders and returns, the
    fine listener already called.
    """

    def __init__(
        self,
        store: PersonalListStore,
        on_fine_changed: Optional[Callable[[int], None]] = None,
        clock: Callable[[], int] = now_millis,
        source: str = "tui",
    ) -> None:
        self._store = store
        self._on_fine_changed = on_fine_changed
        self._clock = clock
        self._source = source
        self._books: list[BookRecord] = store.load()

    @property
    def books(self) -> tuple[BookRecord, ...]:
        """Snapshot of the current list."""
        return tuple(self._books)

    def __len__(self) -> int:
        return len(self._books)

    def refresh(self) -> tuple[BookRecord, ...]:
        """Reload the list from the store and return a snapshot."""
        self._books = self._store.load()
        return self.books

    def total_fine(self, now: Optional[int] = None) -> int:
        """Total fine for the current list at *now* (defaults to the clock)."""
        return calculate_total_fine(self._books, self._now(now))

    def late_books(self, now: Optional[int] = None) -> list[BookRecord]:
        """Late books in the current list at *now* (defaults to the clock)."""
        return find_late_books(self._books, self._now(now))

    def add_book(self, book: BookRecord) -> ListResult:
        """Append *book* unless a book with the same title is already listed.

        The list is reloaded from the store first, so books added from
        another screen are taken into account.

        Parameters
        ----------
        book : BookRecord
            The book to add, usually a catalogue entry.

        Returns
        -------
        ListResult
            ``ADDED`` after one store write, or ``ALREADY_EXISTS`` with no
            write.
        """
        self._books = self._store.load()
        if any(existing.same_title(book) for existing in self._books):
            return ListResult(Outcome.ALREADY_EXISTS)

        self._books.append(book)
        self._store.save(self._books)
        log_activity("add", self._source, title=book.title, author=book.author)
        return ListResult(Outcome.ADDED)

    def set_return_date(self, index: int, day: date) -> ListResult:
        """Set the return-date reminder of the book at *index*.

        A reminder can be set only once per book.

        Parameters
        ----------
        index : int
            Zero-based position in the list.
        day : date
            The return day; stored as local midnight.

        Returns
        -------
        ListResult
            ``UPDATED`` with the new total fine, ``ALREADY_HAS_DATE`` or
            ``INDEX_OUT_OF_RANGE``.

        Raises
        ------
        ValueError
            If *day* is earlier than ``EARLIEST_RETURN_DATE``.
        """
        if not self._in_range(index):
            return ListResult(Outcome.INDEX_OUT_OF_RANGE)
        book = self._books[index]
        if book.has_return_date:
            return ListResult(Outcome.ALREADY_HAS_DATE)

        updated = book.with_return_date(to_epoch_millis(day))
        self._books[index] = updated
        self._store.save(self._books)

        fine = self._fine_changed()
        log_activity(
            "remind",
            self._source,
            title=updated.title,
            return_date=updated.return_date.isoformat(),
            total_fine=fine,
        )
        return ListResult(Outcome.UPDATED, fine)

    def return_book(self, index: int) -> ListResult:
        """Remove the book at *index* from the list.

        Returns
        -------
        ListResult
            ``REMOVED`` with the new total fine, or ``INDEX_OUT_OF_RANGE``.
        """
        if not self._in_range(index):
            return ListResult(Outcome.INDEX_OUT_OF_RANGE)

        book = self._books.pop(index)
        self._store.save(self._books)

        fine = self._fine_changed()
        log_activity("return", self._source, title=book.title, total_fine=fine)
        return ListResult(Outcome.REMOVED, fine)

    def _in_range(self, index: int) -> bool:
        return 0 <= index < len(self._books)

    def _now(self, now: Optional[int]) -> int:
        return self._clock() if now is None else now

    def _fine_changed(self) -> int:
        fine = self.total_fine()
        if self._on_fine_changed is not None:
            self._on_fine_changed(fine)
        return fine
