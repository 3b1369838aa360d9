"""Pytest global setup for isolated pman test state.

This prevents tests from writing to the real log, user config or
home-directory project folder.
"""

from __future__ import annotations

import atexit
import os
from pathlib import Path
import shutil
import tempfile


_TEST_ROOT = Path(tempfile.mkdtemp(prefix="pman-pytest-state-"))
_TEST_STATE_DIR = _TEST_ROOT / "state"
_TEST_HOME = _TEST_ROOT / "home"

_TEST_STATE_DIR.mkdir(parents=True, exist_ok=True)
_TEST_HOME.mkdir(parents=True, exist_ok=True)

# Force test process (and imported pman modules) to use isolated paths.
os.environ["PMAN_STATE_DIR"] = str(_TEST_STATE_DIR)
os.environ["HOME"] = str(_TEST_HOME)
os.environ.pop("PMAN_TICK", None)


@atexit.register
def _cleanup_test_state() -> None:
    shutil.rmtree(_TEST_ROOT, ignore_errors=True)
