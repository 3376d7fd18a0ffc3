"""Infrastructure modules for the resource engine.

Centralized infrastructure components:
- configuration: Settings management (settings, ResourceSettings)
- logging: Structured logging (configure_logging, get_module_logger)
- resources: Resource lookup, conversion and injection
- i18n: Text-only message source
"""

# Configuration
from infrastructure.configuration import settings

# Logging
from infrastructure.logging import get_module_logger

# Resources
from infrastructure.resources import (
    ResourceInjector,
    ResourceResolver,
    create_resource_injector,
    create_resource_resolver,
)

# Messages
from infrastructure.i18n import MessageSource, create_message_source

__all__ = [
    # Configuration
    "settings",
    # Logging
    "get_module_logger",
    # Resources
    "ResourceResolver",
    "ResourceInjector",
    "create_resource_resolver",
    "create_resource_injector",
    # Messages
    "MessageSource",
    "create_message_source",
]
