"""Repo-wide test fixtures.

Snapshots and restores teamkit environment variables between tests and
points the config file at a path that does not exist, so a developer's
own ~/.config/teamkit/config.yaml never leaks into test runs.
"""

from __future__ import annotations

import os

import pytest

_SENSITIVE_ENV_VARS = [
    "TEAMKIT_SERVER",
    "TEAMKIT_CHAT_SERVER",
    "TEAMKIT_API_KEY",
    "TEAMKIT_USERNAME",
    "TEAMKIT_TIMEOUT",
    "TEAMKIT_LOG_LEVEL",
    "TEAMKIT_CONFIG",
]


@pytest.fixture(autouse=True)
def _restore_env(tmp_path):
    """Snapshot teamkit env vars before each test and restore after."""
    snapshot = {}
    for var in _SENSITIVE_ENV_VARS:
        val = os.environ.get(var)
        if val is not None:
            snapshot[var] = val
        os.environ.pop(var, None)
    os.environ["TEAMKIT_CONFIG"] = str(tmp_path / "no-config.yaml")

    yield

    for var in _SENSITIVE_ENV_VARS:
        if var in snapshot:
            os.environ[var] = snapshot[var]
        else:
            os.environ.pop(var, None)
