"""Fixed catalogue of books available to borrow."""

from typing import Optional

from .models import BookRecord

# (title, author, cover_image_ref, info_url)
_CATALOG = [
    (
        "Clean Code",
        "Robert C. Martin",
        "clean_code",
        "https://www.oreilly.com/library/view/clean-code/9780136083238/",
    ),
    (
        "Effective Java (3rd Edition)",
        "Joshua Bloch",
        "effective_java",
        "https://www.oreilly.com/library/view/effective-java-3rd/9780134686097/",
    ),
    (
        "Design Patterns: Elements of Reusable Object-Oriented Software",
        "Erich Gamma, Richard Helm, Ralph Johnson, John Vlissides",
        "design_patterns",
        "https://www.oreilly.com/library/view/design-patterns-elements/0201633612/",
    ),
    (
        "Black Hat Python (2nd Edition)",
        "Justin Seitz, Tim Arnold",
        "blackhatpy",
        "https://nostarch.com/black-hat-python2E",
    ),
    (
        "The Pragmatic Programmer (20th Anniversary Edition)",
        "Andrew Hunt, David Thomas",
        "thepragm",
        "https://pragprog.com/titles/tpp20/the-pragmatic-programmer-20th-anniversary-edition/",
    ),
]


def get_available_books() -> list[BookRecord]:
    """Return the catalogue of available books.

    Returns
    -------
    list of BookRecord
        A new list on every call, always in the same order and with no
        return dates set.
    """
    return [
        BookRecord(title=title, author=author, cover_image_ref=cover, info_url=url)
        for title, author, cover, url in _CATALOG
    ]


def find_catalog_book(title: str) -> Optional[BookRecord]:
    """Look up a catalogue book by title, ignoring case.

    Parameters
    ----------
    title : str
        The title to look up.

    Returns
    -------
    BookRecord or None
        The matching catalogue entry, or ``None`` if no title matches.
    """
    wanted = title.strip().casefold()
    for book in get_available_books():
        if book.title.casefold() == wanted:
            return book
    return None
