import json

import pytest

from bookworm.models import BookRecord
from bookworm.storage import (
    MemoryListStore,
    PrefsListStore,
    decode_books,
    encode_books,
)

from conftest import NOW


@pytest.fixture
def prefs_store(tmp_path):
    return PrefsListStore(tmp_path / "prefs")


@pytest.fixture
def mixed_list(clean_code, effective_java):
    return [clean_code, effective_java.with_return_date(NOW)]


def test_load_without_saved_data_is_empty(prefs_store):
    assert prefs_store.load() == []
    assert not prefs_store.path.exists()


@pytest.mark.parametrize("books", [[], "mixed"])
def test_round_trip(prefs_store, mixed_list, books):
    books = mixed_list if books == "mixed" else books
    prefs_store.save(books)
    assert prefs_store.load() == books


def test_file_layout(tmp_path, clean_code):
    store = PrefsListStore(tmp_path, prefs_name="bookworm_prefs", key="my_list_books")
    store.save([clean_code])

    assert store.path == tmp_path / "bookworm_prefs.json"
    prefs = json.loads(store.path.read_text())
    assert list(prefs) == ["my_list_books"]
    assert json.loads(prefs["my_list_books"]) == [clean_code.to_dict()]


def test_save_overwrites_previous_list(prefs_store, clean_code, effective_java):
    prefs_store.save([clean_code, effective_java])
    prefs_store.save([effective_java])
    assert prefs_store.load() == [effective_java]


def test_save_keeps_other_preferences(tmp_path, clean_code):
    path = tmp_path / "bookworm_prefs.json"
    path.write_text(json.dumps({"theme": "dark"}))

    PrefsListStore(tmp_path).save([clean_code])

    prefs = json.loads(path.read_text())
    assert prefs["theme"] == "dark"
    assert "my_list_books" in prefs


def test_save_leaves_no_temporary_files(prefs_store, clean_code):
    prefs_store.save([clean_code])
    assert [p.name for p in prefs_store.path.parent.iterdir()] == ["bookworm_prefs.json"]


def test_store_accepts_duplicate_titles(prefs_store, clean_code):
    prefs_store.save([clean_code, clean_code])
    assert len(prefs_store.load()) == 2


def test_new_store_instance_sees_saved_list(tmp_path, mixed_list):
    PrefsListStore(tmp_path).save(mixed_list)
    assert PrefsListStore(tmp_path).load() == mixed_list


@pytest.mark.parametrize(
    "content",
    [
        "",
        "{broken",
        "[1, 2, 3]",
        json.dumps({"my_list_books": 42}),
        json.dumps({"my_list_books": "not json"}),
        json.dumps({"my_list_books": json.dumps({"title": "Clean Code"})}),
        json.dumps({"my_list_books": json.dumps([{"title": "A", "author": "B"}, "junk"])}),
        json.dumps({"my_list_books": json.dumps([{"title": "A", "returnDateMillis": "x"}])}),
    ],
)
def test_malformed_data_loads_as_empty(tmp_path, content):
    (tmp_path / "bookworm_prefs.json").write_text(content)
    assert PrefsListStore(tmp_path).load() == []


def test_custom_key_is_independent(tmp_path, clean_code):
    PrefsListStore(tmp_path, key="other").save([clean_code])
    assert PrefsListStore(tmp_path).load() == []


def test_encode_decode(mixed_list):
    assert decode_books(encode_books(mixed_list)) == mixed_list
    assert decode_books(None) == []


def test_memory_store_counts_saves(clean_code):
    store = MemoryListStore()
    assert store.load() == []
    store.save([clean_code])
    store.save([])
    assert store.save_count == 2
    assert store.load() == []


def test_memory_store_with_corrupt_payload():
    assert MemoryListStore("[{]").load() == []


def test_loads_list_written_by_other_clients(tmp_path):
    payload = json.dumps(
        [
            {
                "title": "Clean Code",
                "author": "Robert C. Martin",
                "coverImageResId": 2131165290,
                "websiteUrl": "https://example.org/clean-code",
                "returnDateMillis": 1760000000000,
            }
        ]
    )
    (tmp_path / "bookworm_prefs.json").write_text(json.dumps({"my_list_books": payload}))

    [book] = PrefsListStore(tmp_path).load()

    assert book == BookRecord(
        title="Clean Code",
        author="Robert C. Martin",
        cover_image_ref="2131165290",
        info_url="https://example.org/clean-code",
        return_date_millis=1760000000000,
    )
