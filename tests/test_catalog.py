from bookworm.catalog import find_catalog_book, get_available_books


def test_catalog_has_five_books_in_fixed_order():
    titles = [book.title for book in get_available_books()]
    assert titles == [
        "Clean Code",
        "Effective Java (3rd Edition)",
        "Design Patterns: Elements of Reusable Object-Oriented Software",
        "Black Hat Python (2nd Edition)",
        "The Pragmatic Programmer (20th Anniversary Edition)",
    ]


def test_catalog_is_deterministic_and_fresh():
    first = get_available_books()
    second = get_available_books()
    assert first == second
    assert first is not second
    first.clear()
    assert len(get_available_books()) == 5


def test_catalog_books_have_no_return_date():
    assert all(not book.has_return_date for book in get_available_books())
    assert all(book.author and book.info_url for book in get_available_books())


def test_find_catalog_book_ignores_case_and_spaces():
    book = find_catalog_book("  black hat python (2nd edition) ")
    assert book is not None
    assert book.author == "Justin Seitz, Tim Arnold"


def test_find_catalog_book_unknown_title():
    assert find_catalog_book("Refactoring") is None
