"""Global configuration, constants, and working-folder resolution."""

from __future__ import annotations

import os
import tomllib
from pathlib import Path


PROJECT_FILE_EXTENSION = "pman"
WORK_FOLDER_NAME = f".{PROJECT_FILE_EXTENSION}"

USER_CONFIG_PATH = Path.home() / ".config" / "pman" / "config.toml"


def _load_user_storage() -> dict[str, str]:
    if not USER_CONFIG_PATH.is_file():
        return {}
    try:
        parsed = tomllib.loads(USER_CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError):
        return {}

    storage = parsed.get("storage")
    if not isinstance(storage, dict):
        return {}

    out: dict[str, str] = {}
    state_dir = storage.get("state_dir")
    if isinstance(state_dir, str) and state_dir.strip():
        out["state_dir"] = state_dir.strip()
    return out


def _resolve_dir(raw: str) -> Path:
    return Path(os.path.expanduser(raw)).expanduser()


def _ensure_writable_dir(path: Path, fallback: Path) -> Path:
    """Ensure directory exists, falling back when creation is denied."""
    try:
        path.mkdir(parents=True, exist_ok=True)
        return path
    except OSError:
        fallback.mkdir(parents=True, exist_ok=True)
        return fallback


_storage = _load_user_storage()

STATE_DIR = _ensure_writable_dir(
    _resolve_dir(
        os.environ.get("PMAN_STATE_DIR")
        or _storage.get("state_dir")
        or "~/.local/state/pman"
    ),
    _resolve_dir("/tmp/pman"),
)

LOG_FILE = STATE_DIR / "pman.log"


def resolve_work_folder(root: str | None = None) -> Path:
    """Return the project folder: ``<root or home>/.pman``."""
    base = _resolve_dir(root) if root else Path.home()
    return base / WORK_FOLDER_NAME


def ensure_work_folder(path: Path) -> Path:
    """Create the project folder if it does not exist yet."""
    path.mkdir(parents=True, exist_ok=True)
    return path
