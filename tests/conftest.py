"""Root-level pytest fixtures for the iae test suite.

The process-wide policy is global state. Every test starts from the
library defaults, with no IAE_* variables set, and the defaults are
restored afterwards.
"""

import os

import pytest

from iae.policy import configure, reset_policy
from iae.schemas import ParamConfig, resolve_config
from iae.schemas.env import ENV_PREFIX


# =============================================================================
# Policy Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def default_policy(monkeypatch):
    """Library default policy, restored after each test."""
    for key in list(os.environ):
        if key.startswith(ENV_PREFIX):
            monkeypatch.delenv(key)
    policy = reset_policy()
    yield policy
    reset_policy()


@pytest.fixture
def make_policy():
    """Factory fixture for policy snapshots (not installed).

    Examples
    --------
    >>> def test_snapshot(make_policy):
    ...     policy = make_policy(release="off")
    ...     assert policy.release == "disabled"
    """
    def _make(**user_overrides):
        return resolve_config(ParamConfig(), user_overrides or None)

    return _make


@pytest.fixture
def set_modes():
    """Install a process-wide policy from user-level overrides."""
    def _set(**user_overrides):
        return configure(**user_overrides)

    return _set
