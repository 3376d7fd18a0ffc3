"""Resource resolution infrastructure settings."""

from pydantic import Field, field_validator

from infrastructure.configuration.base import InfrastructureSettings


class ResourceSettings(InfrastructureSettings):
    """Resource resolution and injection configuration.

    Environment Variables:
        RESOURCES_DEFAULT_LOCALE: Process-wide default locale used when no
            locale is requested and as the last fallback candidate
            (default: en)
        RESOURCES_BASENAME: Name of the resource bundle exposed by stores
            created without an explicit basename (default: messages)

    Example:
        ```python
        from infrastructure.configuration import settings

        default_locale = settings.resources.default_locale
        basename = settings.resources.basename
        ```
    """

    default_locale: str = Field(
        default="en",
        alias="RESOURCES_DEFAULT_LOCALE",
        description="Default locale tag, e.g. 'en', 'en_US' or 'fr-CA'",
    )
    basename: str = Field(
        default="messages",
        alias="RESOURCES_BASENAME",
        description="Basename reported by resource stores",
    )

    @field_validator("default_locale", mode="before")
    @classmethod
    def _normalize_locale(cls, v):
        """Strip whitespace around the locale tag; None means the root locale."""
        if v is None:
            return ""
        if not isinstance(v, str):
            raise ValueError("RESOURCES_DEFAULT_LOCALE must be a string")
        return v.strip()
