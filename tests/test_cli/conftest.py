"""Fixtures for CLI tests."""

import os
from datetime import datetime, timedelta, timezone
from unittest.mock import patch

import pytest

# Tuesday 23 April 2024, 11:48:52 at +03:00
INSTANT = datetime(2024, 4, 23, 8, 48, 52, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def isolated(temp_dir, clean_env):
    """Run every CLI test away from any real config file."""
    old_cwd = os.getcwd()
    os.chdir(temp_dir)
    try:
        with patch(
            "timeman.core.config.user_config_path",
            return_value=temp_dir / "home" / "config.toml",
        ):
            yield temp_dir
    finally:
        os.chdir(old_cwd)


@pytest.fixture
def frozen_now():
    """Pin the current time to INSTANT, expressed in the requested offset."""

    def fake_now(offset=None):
        return INSTANT.astimezone(offset or timezone(timedelta(hours=3)))

    with patch("timeman.core.timestamp.now", side_effect=fake_now) as mock_now:
        yield mock_now
