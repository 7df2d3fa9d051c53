"""Pytest configuration and fixtures for SymbolicDate tests."""

from __future__ import annotations

import os
import sys
import time
from pathlib import Path

import pytest

# Add the parent directory to sys.path so symbolic_date can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

# UTC+04:00 without daylight saving, spelled as a POSIX TZ string so no
# tz database is needed. Equivalent to Asia/Baku.
TEST_TIMEZONE = "<+04>-4"
TEST_UTC_OFFSET = "+0400"


@pytest.fixture(scope="session", autouse=True)
def local_timezone():
    """Run every test with the process timezone pinned to UTC+04:00."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset() is required to pin the process timezone")

    previous = os.environ.get("TZ")
    os.environ["TZ"] = TEST_TIMEZONE
    time.tzset()
    assert time.strftime("%z", time.localtime(0)) == TEST_UTC_OFFSET, (
        "Tests are expected to run in the UTC+04:00 timezone"
    )

    yield TEST_TIMEZONE

    if previous is None:
        del os.environ["TZ"]
    else:
        os.environ["TZ"] = previous
    time.tzset()
