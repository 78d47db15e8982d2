"""
Pytest configuration for the Inscribe test suite.

This conftest.py provides:
- Silent logging (suppresses console output)
- Isolation from real ~/.inscribe and ./.inscribe config files
- Common fixtures for sample target files
"""

import os

import pytest

from inscribe.cli.config import CLIConfig
from inscribe.logging_config import setup_logging


# ============================================================================
# GLOBAL CONFIGURATION
# ============================================================================

def pytest_configure(config):
    """Keep console logging off for the whole run."""
    os.environ.pop("INSCRIBE_VERBOSE", None)
    os.environ.pop("INSCRIBE_HUMAN_MODE", None)
    os.environ.setdefault("INSCRIBE_FILE_LOGGING", "0")


# ============================================================================
# LOGGING / ISOLATION FIXTURES
# ============================================================================

@pytest.fixture(autouse=True)
def setup_test_logging():
    """Suppress console logs for clean test output."""
    setup_logging(level="DEBUG", suppress_console=True, enable_file_logging=False, force=True)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """
    Point HOME and CWD at empty temp directories so no real config files
    leak into a test.
    """
    home = tmp_path / "home"
    work = tmp_path / "work"
    home.mkdir()
    work.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(work)
    CLIConfig.reset()
    yield work
    CLIConfig.reset()


# ============================================================================
# SAMPLE FILE FIXTURES
# ============================================================================

@pytest.fixture
def sample_file(isolated_config):
    """A three-line LF file: a, b, c."""
    path = isolated_config / "sample.txt"
    path.write_bytes(b"a\nb\nc\n")
    return path


@pytest.fixture
def crlf_file(isolated_config):
    """A three-line CRLF file: a, b, c."""
    path = isolated_config / "crlf.txt"
    path.write_bytes(b"a\r\nb\r\nc\r\n")
    return path
