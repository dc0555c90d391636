from __future__ import annotations

import pytest

from app.config import reset_app_config_cache
from shared import logging_config


@pytest.fixture(autouse=True)
def _isolated_logging_env(monkeypatch: pytest.MonkeyPatch):
    """Keep user-level logging overrides and handlers out of each test."""

    monkeypatch.delenv("TINYMID_LOG_LEVEL", raising=False)
    monkeypatch.delenv("TINYMID_LOG_FILE", raising=False)
    monkeypatch.delenv("TINYMID_VERSION", raising=False)
    logging_config._reset_for_tests()
    reset_app_config_cache()
    try:
        yield
    finally:
        logging_config._reset_for_tests()
        reset_app_config_cache()
