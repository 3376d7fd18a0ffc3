"""Resolution result dataclass.

Uniform result produced by the shared resolution algorithm. The strict
resolver API unwraps it and raises; the injector unwraps it and discards
failures.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple

from infrastructure.resources.exceptions import (
    ConversionError,
    NoSuchResourceError,
    ResourceError,
)
from infrastructure.resources.models import Locale


class ResolutionStatus(Enum):
    """Status codes for resolution results.

    Attributes:
        SUCCESS: A value was found (and converted, when requested)
        NOT_FOUND: No candidate locale holds the key
        CONVERSION_ERROR: A value was found but could not be converted
    """

    SUCCESS = "success"
    NOT_FOUND = "not_found"
    CONVERSION_ERROR = "conversion_error"


@dataclass(frozen=True)
class ResolutionResult:
    """Outcome of resolving one key.

    Attributes:
        status: ResolutionStatus -- high-level outcome
        key: str -- the key that was resolved
        value: Optional[Any] -- resolved value on success
        error: Optional[ResourceError] -- typed failure otherwise
        locales: Tuple[Locale, ...] -- candidate chain that was tried
        locale: Optional[Locale] -- the candidate that matched
    """

    status: ResolutionStatus
    key: str
    value: Optional[Any] = None
    error: Optional[ResourceError] = None
    locales: Tuple[Locale, ...] = ()
    locale: Optional[Locale] = None

    @property
    def is_success(self) -> bool:
        return self.status == ResolutionStatus.SUCCESS

    @classmethod
    def success(
        cls,
        key: str,
        value: Any,
        locales: Tuple[Locale, ...] = (),
        locale: Optional[Locale] = None,
    ) -> "ResolutionResult":
        return cls(
            status=ResolutionStatus.SUCCESS,
            key=key,
            value=value,
            locales=locales,
            locale=locale,
        )

    @classmethod
    def not_found(cls, key: str, locales: Tuple[Locale, ...]) -> "ResolutionResult":
        """Create a NOT_FOUND result carrying a NoSuchResourceError."""
        return cls(
            status=ResolutionStatus.NOT_FOUND,
            key=key,
            error=NoSuchResourceError(key, locales),
            locales=locales,
        )

    @classmethod
    def conversion_failed(
        cls,
        key: str,
        error: ConversionError,
        locales: Tuple[Locale, ...] = (),
        locale: Optional[Locale] = None,
    ) -> "ResolutionResult":
        return cls(
            status=ResolutionStatus.CONVERSION_ERROR,
            key=key,
            error=error,
            locales=locales,
            locale=locale,
        )

    def unwrap(self) -> Any:
        """Return the value, or raise the carried error.

        Raises:
            NoSuchResourceError: If the key was not found.
            ConversionError: If conversion failed.
        """
        if self.is_success:
            return self.value
        assert self.error is not None
        raise self.error

    def value_or(self, default: Any) -> Any:
        return self.value if self.is_success else default
