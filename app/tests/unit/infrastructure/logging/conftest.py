"""Fixtures for infrastructure.logging tests."""

from unittest.mock import Mock

import pytest

from infrastructure.configuration import ResourceSettings, Settings


def _settings_double(log_level: str, is_production: bool) -> Mock:
    double = Mock(spec=Settings)
    double.LOG_LEVEL = log_level
    double.is_production = is_production
    double.resources = ResourceSettings()
    return double


@pytest.fixture
def mock_settings():
    """Development settings double (console rendering)."""
    return _settings_double("INFO", is_production=False)


@pytest.fixture
def production_settings():
    """Production settings double (JSON rendering)."""
    return _settings_double("WARNING", is_production=True)
