"""
Pytest configuration file.

Ensures the repo root is on sys.path so that 'import frontkit...' works, and
provides shared fixtures for settings isolation and local timezone control.
"""
import os
import sys
import time
from pathlib import Path

import pytest

# Add the repo root to sys.path
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from frontkit.config.settings import reset_settings  # noqa: E402
from frontkit.storage.helpers import reset_storage_helpers  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_settings():
    """Reload settings from the environment and forget storage helpers for every test."""
    reset_settings()
    reset_storage_helpers()
    yield
    reset_settings()
    reset_storage_helpers()


@pytest.fixture
def local_tz():
    """
    Switch the process-local timezone for the duration of a test.

    Usage:
        def test_something(local_tz):
            local_tz("EET-2EEST,M3.5.0/3,M10.5.0/4")
    """
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset() is not available on this platform")

    original = os.environ.get("TZ")

    def _set(tz_rule: str) -> None:
        os.environ["TZ"] = tz_rule
        time.tzset()

    yield _set

    if original is None:
        os.environ.pop("TZ", None)
    else:
        os.environ["TZ"] = original
    time.tzset()
