"""Persistence for the personal reading list.

The list is stored the way a mobile app keeps small state in its shared
preferences: a JSON file named after the preferences namespace maps entry
keys to JSON-encoded strings. The ``my_list_books`` entry holds a JSON
array of book objects.

Loading never raises for absent or malformed data; it degrades to an empty
list. Write errors (``OSError``) are left to the caller.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Iterable, Optional, Protocol

from .models import BookRecord

DEFAULT_PREFS_NAME = "bookworm_prefs"
DEFAULT_LIST_KEY = "my_list_books"


class PersonalListStore(Protocol):
    """Anything that can load and save the personal list."""

    def load(self) -> list[BookRecord]: ...

    def save(self, books: Iterable[BookRecord]) -> None: ...


def encode_books(books: Iterable[BookRecord]) -> str:
    """Serialise books to a JSON array string.

    Parameters
    ----------
    books : iterable of BookRecord
        Books in list order.

    Returns
    -------
    str
        The JSON array.
    """
    return json.dumps([book.to_dict() for book in books], ensure_ascii=False)


def decode_books(payload: Optional[str]) -> list[BookRecord]:
    """Parse a JSON array string back into books.

    Parameters
    ----------
    payload : str or None
        The stored JSON text, or ``None`` if nothing was stored.

    Returns
    -------
    list of BookRecord
        The decoded books, or an empty list if *payload* is missing or
        cannot be parsed as a list of book objects.
    """
    if not isinstance(payload, str):
        return []
    try:
        data = json.loads(payload)
        if not isinstance(data, list):
            return []
        return [BookRecord.from_dict(item) for item in data]
    except (json.JSONDecodeError, ValueError, TypeError):
        return []


class PrefsListStore:
    """File-backed list store under a fixed namespace and key.

    Parameters
    ----------
    prefs_dir : Path
        Directory holding the preferences file.
    prefs_name : str, optional
        Namespace; the file is ``<prefs_dir>/<prefs_name>.json``.
    key : str, optional
        Entry key holding the encoded list.
    """

    def __init__(
        self,
        prefs_dir: Path,
        prefs_name: str = DEFAULT_PREFS_NAME,
        key: str = DEFAULT_LIST_KEY,
    ) -> None:
        self.path = Path(prefs_dir) / f"{prefs_name}.json"
        self.key = key

    def _read_prefs(self) -> dict:
        """Return the whole preferences mapping, or ``{}`` if unreadable."""
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError):
            return {}
        return data if isinstance(data, dict) else {}

    def load(self) -> list[BookRecord]:
        """Return the stored list, or ``[]`` if absent or unreadable."""
        return decode_books(self._read_prefs().get(self.key))

    def save(self, books: Iterable[BookRecord]) -> None:
        """Overwrite the stored list with *books*.

        Other entries in the preferences file are kept. The file is
        replaced atomically.
        """
        prefs = self._read_prefs()
        prefs[self.key] = encode_books(books)

        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self.path.stem}-", suffix=".tmp", dir=self.path.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(prefs, f, indent=2, ensure_ascii=False)
                f.write("\n")
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise


class MemoryListStore:
    """In-process list store, mainly for tests.

    Books go through the same JSON encoding as ``PrefsListStore`` so the
    round-trip is exercised. ``save_count`` counts calls to ``save``.

    Parameters
    ----------
    payload : str, optional
        Initial stored JSON text, e.g. to simulate corrupted data.
    """

    def __init__(self, payload: Optional[str] = None) -> None:
        self.payload = payload
        self.save_count = 0

    def load(self) -> list[BookRecord]:
        return decode_books(self.payload)

    def save(self, books: Iterable[BookRecord]) -> None:
        self.payload = encode_books(books)
        self.save_count += 1
