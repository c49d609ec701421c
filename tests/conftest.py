"""Shared fixtures."""

import os

import pytest

from quote_tracker.infrastructure.config import settings as settings_module


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch):
    """Keep QUOTE_TRACKER_* variables from the developer's shell and .env out of tests."""
    monkeypatch.setattr(settings_module, "load_dotenv", lambda *args, **kwargs: False)
    for name in list(os.environ):
        if name.startswith("QUOTE_TRACKER_"):
            monkeypatch.delenv(name)
