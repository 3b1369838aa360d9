"""Typed settings loaded from TOML config with env-var overrides."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from importlib import resources

from .config import USER_CONFIG_PATH


def _load_default_toml() -> dict:
    """Load the built-in default_config.toml shipped with the package."""
    ref = resources.files("pman").joinpath("default_config.toml")
    return tomllib.loads(ref.read_text(encoding="utf-8"))


def _load_user_toml() -> dict:
    """Load user config if it exists, otherwise empty dict."""
    if USER_CONFIG_PATH.is_file():
        return tomllib.loads(USER_CONFIG_PATH.read_text(encoding="utf-8"))
    return {}


def _deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge override into base (override wins)."""
    merged = dict(base)
    for key, val in override.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(val, dict):
            merged[key] = _deep_merge(merged[key], val)
        else:
            merged[key] = val
    return merged


@dataclass
class Settings:
    tick_interval: float
    project_description: str
    task_description: str

    _raw: dict = field(default_factory=dict, repr=False)


def load_settings() -> Settings:
    """Load settings: defaults ← user TOML ← env vars."""
    raw = _deep_merge(_load_default_toml(), _load_user_toml())

    dash = raw.get("dashboard", {})
    projects = raw.get("projects", {})
    tasks = raw.get("tasks", {})

    tick = float(os.environ.get("PMAN_TICK", dash.get("tick_interval", 0.25)))
    if tick <= 0:
        tick = 0.25

    return Settings(
        tick_interval=tick,
        project_description=str(
            projects.get("default_description", "Sample description")
        ),
        task_description=str(tasks.get("default_description", "Description")),
        _raw=raw,
    )


# Module-level singleton, loaded once on import.
SETTINGS = load_settings()
