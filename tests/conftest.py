import logging
import pytest
import sys
import os

# Add src dir to path to allow importing log_filter_parse without installing
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../src')))

from log_filter_parse.config import DEFAULT_ENV_VAR


@pytest.fixture(scope="function", autouse=True)
def restore_package_logger_level():
    """Undo any set_verbosity() call made by a test."""
    pkg_logger = logging.getLogger('log_filter_parse')
    level = pkg_logger.level
    yield
    pkg_logger.setLevel(level)

@pytest.fixture
def clean_env(monkeypatch):
    """Remove the default directive variable so from_env() starts unset."""
    monkeypatch.delenv(DEFAULT_ENV_VAR, raising=False)
    return monkeypatch

# --- Helper: directive strings of a given size ---
def numbered_rules(count: int, level: str = "info") -> str:
    """Build 'mod0=<level>,mod1=<level>,...' with ``count`` distinct modules."""
    return ",".join(f"mod{i}={level}" for i in range(count))
