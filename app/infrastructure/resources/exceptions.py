"""Custom exceptions for the resource engine.

Provides the error taxonomy shared by the resolver, the message source
and the injector.
"""

from typing import Any, Optional, Sequence


class ResourceError(Exception):
    """Base exception for all resource resolution errors.

    Example:
        try:
            resolver.resolve("app.title")
        except ResourceError as e:
            logger.error("resource_error", error=str(e))
    """

    pass


class NoSuchResourceError(ResourceError):
    """Raised when a key has no value in any candidate locale.

    Attributes:
        key: The key that was looked up.
        locales: The locale candidate chain that was tried, in order.

    Example:
        >>> resolver.resolve("key.bogus")
        Traceback (most recent call last):
        ...
        NoSuchResourceError: No resource found for key 'key.bogus' in locales [en]
    """

    def __init__(self, key: str, locales: Sequence[Any] = ()):
        self.key = key
        self.locales = tuple(locales)
        tried = ", ".join(str(locale) or "<root>" for locale in self.locales)
        super().__init__(f"No resource found for key '{key}' in locales [{tried}]")


class ConversionError(ResourceError):
    """Raised when a value cannot be converted to the requested type.

    Either no converter is registered for the target type or the
    registered converter rejected the input.

    Attributes:
        value: The value that failed to convert.
        target_type: The requested target type.
        reason: Optional description of the underlying failure.
    """

    def __init__(self, value: Any, target_type: Any, reason: Optional[str] = None):
        self.value = value
        self.target_type = target_type
        self.reason = reason
        type_name = getattr(target_type, "__name__", repr(target_type))
        message = f"Cannot convert {value!r} to {type_name}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
