"""Pytest configuration and fixtures for timeago-text tests."""

from datetime import datetime

import pytest

# Fixed reference point used across tests (naive UTC)
FIXED_NOW = datetime(2024, 6, 15, 12, 0, 0)


@pytest.fixture(autouse=True)
def reset_clock():
    """Reset the injectable clock before and after each test.

    Tests that freeze time must do so explicitly via set_clock() or the
    frozen_clock fixture.
    """
    from timeago_text.core.timing import reset_clock as _reset

    _reset()
    yield
    _reset()


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the global config path at an empty temp dir and reset the singleton.

    Prevents tests from reading ~/.timeago-text/config.yaml.
    """
    from timeago_text.core import config

    monkeypatch.setattr(config, "GLOBAL_CONFIG_PATH", tmp_path / "home" / "config.yaml")
    config.reset_config()
    yield
    config.reset_config()


@pytest.fixture
def frozen_clock() -> datetime:
    """Freeze the process clock at FIXED_NOW.

    Usage:
        def test_something(frozen_clock):
            assert utc_now_naive() == frozen_clock
    """
    from timeago_text.core.timing import set_clock

    set_clock(lambda: FIXED_NOW)
    return FIXED_NOW
