import json
from pathlib import Path

from bookworm import settings as settings_module
from bookworm.settings import Settings, load_settings, open_store, save_settings


def test_missing_file_is_created_with_defaults(tmp_path):
    path = tmp_path / "conf" / "bookworm-settings.json"

    settings = load_settings(path)

    assert settings == Settings()
    assert json.loads(path.read_text()) == {
        "prefs_path": "prefs",
        "prefs_name": "bookworm_prefs",
        "list_key": "my_list_books",
        "late_warnings": True,
    }


def test_round_trip(tmp_path):
    path = tmp_path / "settings.json"
    custom = Settings(prefs_path="/tmp/elsewhere", late_warnings=False)
    save_settings(custom, path)
    assert load_settings(path) == custom


def test_invalid_json_falls_back_to_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{oops")
    assert load_settings(path) == Settings()


def test_wrong_types_and_unknown_keys_are_ignored(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"late_warnings": "no", "list_key": "books", "colour": "red"}))

    settings = load_settings(path)

    assert settings.late_warnings is True
    assert settings.list_key == "books"


def test_relative_prefs_path_resolves_under_app_dir(monkeypatch, tmp_path):
    monkeypatch.setattr(settings_module, "_BOOKWORM_DIR", tmp_path)
    assert Settings(prefs_path="store").resolve_prefs_path() == (tmp_path / "store").resolve()


def test_absolute_and_home_paths(tmp_path):
    assert Settings(prefs_path=str(tmp_path)).resolve_prefs_path() == tmp_path.resolve()
    assert Settings(prefs_path="~/bw").resolve_prefs_path() == (Path.home() / "bw").resolve()


def test_open_store_uses_namespace_and_key(tmp_path, clean_code):
    settings = Settings(prefs_path=str(tmp_path), prefs_name="shelf", list_key="mine")

    store = open_store(settings)
    store.save([clean_code])

    assert store.path == tmp_path.resolve() / "shelf.json"
    assert "mine" in json.loads(store.path.read_text())
