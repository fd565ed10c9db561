"""
Top-level test configuration for rightsgate.
"""

import os

import pytest

from rightsgate.config import reset_settings

# Ensure test-friendly defaults for configure_logging()
os.environ.setdefault("RIGHTSGATE_JSON_LOGS", "false")
os.environ.setdefault("RIGHTSGATE_LOG_LEVEL", "DEBUG")


@pytest.fixture(autouse=True)
def fresh_settings():
    reset_settings()
    yield
    reset_settings()
