from __future__ import annotations

from pathlib import Path

APP_DIR_NAME = ".cui"
PREFERENCES_FILE_NAME = "preferences.json"


def config_base_dir(custom: Path | str | None = None) -> Path:
    # Explicit override wins; otherwise the process owner's home directory.
    if custom:
        return Path(custom).expanduser()
    return Path.home()


def config_dir(custom: Path | str | None = None) -> Path:
    return config_base_dir(custom) / APP_DIR_NAME


def preferences_path(config_dir: Path) -> Path:
    return config_dir / PREFERENCES_FILE_NAME


def ensure_dir(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path
