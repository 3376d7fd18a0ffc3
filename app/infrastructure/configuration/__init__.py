"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the resource
engine using Pydantic BaseSettings with domain-based organization.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    ResourceSettings: Resource resolution settings class (for testing)

Example:
    ```python
    from infrastructure.configuration import settings

    default_locale = settings.resources.default_locale
    ```
"""

from infrastructure.configuration.settings import Settings, settings
from infrastructure.configuration.infrastructure.resources import ResourceSettings

__all__ = ["Settings", "ResourceSettings", "settings"]
