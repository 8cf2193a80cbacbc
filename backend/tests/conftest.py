"""
Test Configuration: settings cache and structlog isolation.

Each test gets fresh Settings (env changes via monkeypatch take effect)
and structlog defaults, so logging configured by one test never filters
another test's captured events.
"""

import pytest
import structlog

from core import config as config_module


@pytest.fixture(autouse=True)
def _isolate_settings_and_logging():
    config_module.get_settings.cache_clear()
    structlog.reset_defaults()
    yield
    config_module.get_settings.cache_clear()
    structlog.reset_defaults()
