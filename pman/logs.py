"""Append-only activity log for the dashboard."""

from __future__ import annotations

import time

from . import config


def log(msg: str) -> None:
    try:
        ts: str = time.strftime("%Y-%m-%d %H:%M:%S")
        with open(config.LOG_FILE, "a", encoding="utf-8") as f:
            f.write(f"[{ts}] {msg}\n")
    except OSError:
        pass
