"""Locale model for the resource engine.

Defines the Locale value object used as the lookup dimension of resource
stores, plus the process-wide default locale.
"""

from dataclasses import dataclass
from typing import Optional, Union

from infrastructure.configuration import settings


@dataclass(frozen=True)
class Locale:
    """A language/country/variant triple identifying a resource partition.

    Language codes are stored lower-case and country codes upper-case, so
    Locale("EN", "us") == Locale("en", "US"). The empty locale is the root
    locale.

    Attributes:
        language: ISO 639 language code (e.g., "en").
        country: ISO 3166 country code (e.g., "US").
        variant: Vendor or platform variant (e.g., "POSIX").
    """

    language: str = ""
    country: str = ""
    variant: str = ""

    def __post_init__(self):
        object.__setattr__(self, "language", self.language.strip().lower())
        object.__setattr__(self, "country", self.country.strip().upper())
        object.__setattr__(self, "variant", self.variant.strip())

    @classmethod
    def from_string(cls, locale_str: str) -> "Locale":
        """Parse a locale tag.

        Accepts underscore or hyphen separators: "en", "en_US", "en-US",
        "en_US_POSIX". The empty string parses to the root locale.

        Args:
            locale_str: Locale tag.

        Returns:
            Parsed Locale.

        Raises:
            ValueError: If the tag has more than three parts.
        """
        tag = locale_str.strip().replace("-", "_")
        if not tag:
            return ROOT
        parts = tag.split("_", 2)
        if len(parts) == 3 and "_" in parts[2]:
            raise ValueError(f"Unsupported locale: {locale_str}")
        return cls(*parts)

    @classmethod
    def coerce(cls, value: Union["Locale", str]) -> "Locale":
        """Return value as a Locale, parsing it when given a string."""
        if isinstance(value, Locale):
            return value
        if isinstance(value, str):
            return cls.from_string(value)
        raise TypeError(f"Expected Locale or str, got {type(value).__name__}")

    @property
    def is_root(self) -> bool:
        return not (self.language or self.country or self.variant)

    def language_only(self) -> "Locale":
        """Return this locale with country and variant stripped."""
        if not self.country and not self.variant:
            return self
        return Locale(self.language)

    @property
    def tag(self) -> str:
        """Underscore-separated tag (e.g., "en_US"); empty for the root locale."""
        return "_".join(p for p in (self.language, self.country, self.variant) if p)

    def __str__(self) -> str:
        return self.tag


ROOT = Locale()
ENGLISH = Locale("en")
FRENCH = Locale("fr")
GERMAN = Locale("de")
US = Locale("en", "US")
UK = Locale("en", "GB")
CANADA = Locale("en", "CA")
CANADA_FRENCH = Locale("fr", "CA")
FRANCE = Locale("fr", "FR")


_default_locale: Optional[Locale] = None


def get_default_locale() -> Locale:
    """Return the process-wide default locale.

    Initialised from settings.resources.default_locale on first use.
    """
    global _default_locale
    if _default_locale is None:
        _default_locale = Locale.from_string(settings.resources.default_locale)
    return _default_locale


def set_default_locale(locale: Union[Locale, str, None]) -> Locale:
    """Replace the process-wide default locale.

    Args:
        locale: New default; None re-reads it from settings on next use.

    Returns:
        The previous default locale.
    """
    global _default_locale
    previous = get_default_locale()
    _default_locale = Locale.coerce(locale) if locale is not None else None
    return previous
