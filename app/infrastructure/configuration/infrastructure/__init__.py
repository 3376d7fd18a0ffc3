"""Infrastructure settings __init__ - exports all infrastructure settings."""

from infrastructure.configuration.infrastructure.resources import ResourceSettings

__all__ = [
    "ResourceSettings",
]
