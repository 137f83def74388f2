"""
Name: Pytest Configuration and Shared Fixtures

Responsibilities:
  - Provide reusable test fixtures (sample text, chunk helpers)
  - Isolate Settings from .env files and process env vars
  - Register the unit marker

Collaborators:
  - pytest: Test framework
  - highlight_chunks.crosscutting.config: Settings singleton

Notes:
  - get_settings() is lru_cached; every test starts with a clean cache
"""

import os
import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from highlight_chunks.crosscutting import config as app_config  # noqa: E402

app_config.Settings.model_config["env_file"] = None

# Positions: 01234567890123456789012345678901234567
TEXT = "This is a string with words to search."


def pytest_configure(config) -> None:
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, no external dependencies)"
    )


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """R: Clear HIGHLIGHT_* env vars and the settings cache around each test."""
    for key in list(os.environ):
        if key.startswith("HIGHLIGHT_"):
            monkeypatch.delenv(key, raising=False)
    app_config.get_settings.cache_clear()
    yield
    app_config.get_settings.cache_clear()


@pytest.fixture
def sample_text() -> str:
    return TEXT
