"""Settings management for Bookworm.

Settings are persisted as JSON in ``_BOOKWORM_DIR/bookworm-settings.json``.
The file is created with defaults on first launch; users edit it directly
and restart the app to apply changes.
"""

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Optional

from .storage import DEFAULT_LIST_KEY, DEFAULT_PREFS_NAME, PrefsListStore

_BOOKWORM_DIR = Path.home() / ".bookworm"
_DEFAULT_SETTINGS_PATH = _BOOKWORM_DIR / "bookworm-settings.json"


@dataclass
class Settings:
    """Application settings persisted as JSON.

    Relative paths are resolved from ``_BOOKWORM_DIR/``. Absolute paths and
    ``~`` expansion are supported.

    Attributes
    ----------
    prefs_path : str
        Directory holding the preferences file with the personal list.
    prefs_name : str
        Preferences namespace, used as the file name.
    list_key : str
        Key of the personal list inside the preferences file.
    late_warnings : bool
        Whether to warn about late books when the list screen is shown.
    """

    prefs_path: str = "prefs"
    prefs_name: str = DEFAULT_PREFS_NAME
    list_key: str = DEFAULT_LIST_KEY
    late_warnings: bool = True

    def resolve_prefs_path(self) -> Path:
        """Resolve ``prefs_path`` to an absolute path.

        Relative paths are resolved from ``_BOOKWORM_DIR/``.

        Returns
        -------
        Path
            Absolute, resolved path to the preferences directory.
        """
        p = Path(self.prefs_path).expanduser()
        if not p.is_absolute():
            p = _BOOKWORM_DIR / p
        return p.resolve()


def load_settings(path: Optional[Path] = None) -> Settings:
    """Load settings from a JSON file.

    Creates the default settings file if it does not exist. Unknown keys
    are ignored; values of the wrong type fall back to their defaults.

    Parameters
    ----------
    path : Path, optional
        Path to the settings file. Defaults to
        ``_BOOKWORM_DIR/bookworm-settings.json``.

    Returns
    -------
    Settings
        Loaded (or default) application settings.
    """
    path = path or _DEFAULT_SETTINGS_PATH
    if not path.exists():
        settings = Settings()
        save_settings(settings, path)
        return settings
    try:
        data = json.loads(path.read_text())
    except json.JSONDecodeError:
        return Settings()
    if not isinstance(data, dict):
        return Settings()

    defaults = Settings()
    values = {}
    for f in fields(Settings):
        default = getattr(defaults, f.name)
        value = data.get(f.name, default)
        values[f.name] = value if type(value) is type(default) else default
    return Settings(**values)


def save_settings(settings: Settings, path: Optional[Path] = None) -> None:
    """Write settings to a JSON file.

    Creates parent directories if they do not exist.

    Parameters
    ----------
    settings : Settings
        The settings to persist.
    path : Path, optional
        Destination file path. Defaults to
        ``_BOOKWORM_DIR/bookworm-settings.json``.
    """
    path = path or _DEFAULT_SETTINGS_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(settings), indent=2) + "\n")


def open_store(settings: Settings) -> PrefsListStore:
    """Build the personal list store described by *settings*."""
    return PrefsListStore(
        settings.resolve_prefs_path(),
        prefs_name=settings.prefs_name,
        key=settings.list_key,
    )
