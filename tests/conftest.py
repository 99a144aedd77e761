"""Pytest configuration and fixtures."""

import os
import tempfile
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
from click.testing import CliRunner

PLUS_3 = timezone(timedelta(hours=3))


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def plus_3():
    """Fixed +03:00 offset."""
    return PLUS_3


@pytest.fixture
def sample_ts():
    """Tuesday 23 April 2024, 11:40:37.467312 at +03:00."""
    return datetime(2024, 4, 23, 11, 40, 37, 467312, tzinfo=PLUS_3)


@pytest.fixture
def sample_config(temp_dir):
    """Create a sample configuration file."""
    config_content = '''
[defaults]
format = "%F %T %:z"
offset = "+00:00"
duration_flags = "sn"
pretty = false
'''
    config_file = temp_dir / "timeman.toml"
    config_file.write_text(config_content)
    return config_file


@pytest.fixture
def clean_env():
    """Clean environment variables that might affect tests."""
    env_vars = ["TIMEMAN_FORMAT", "TIMEMAN_OFFSET"]
    old_values = {var: os.environ.get(var) for var in env_vars}

    for var in env_vars:
        if var in os.environ:
            del os.environ[var]

    yield

    for var, value in old_values.items():
        if value is not None:
            os.environ[var] = value
        elif var in os.environ:
            del os.environ[var]
