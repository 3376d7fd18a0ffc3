"""String to type conversion for resolved resources.

Provides a pluggable registry of converters keyed by target type. Built-in
numeric and boolean converters use pydantic's string validation, which is
locale independent.
"""

from decimal import Decimal
from threading import Lock
from typing import Any, Callable, Dict

from pydantic import TypeAdapter

from infrastructure.logging import get_module_logger
from infrastructure.resources.exceptions import ConversionError
from infrastructure.resources.models import Locale

logger = get_module_logger()

Converter = Callable[[str], Any]


def _identity(value: str) -> str:
    return value


def _string_adapter(target_type: type) -> Converter:
    adapter = TypeAdapter(target_type)

    def convert(value: str) -> Any:
        return adapter.validate_strings(value.strip())

    convert.__name__ = f"convert_{target_type.__name__.lower()}"
    return convert


def builtin_converters() -> Dict[Any, Converter]:
    """Return a fresh mapping of the built-in converters."""
    return {
        str: _identity,
        int: _string_adapter(int),
        float: _string_adapter(float),
        bool: _string_adapter(bool),
        Decimal: _string_adapter(Decimal),
        Locale: Locale.from_string,
    }


class ConverterRegistry:
    """Registry of string converters keyed by target type.

    Registration is guarded by a lock; lookups read a dict and need none.

    Example:
        registry = ConverterRegistry()
        registry.register(Path, Path)
        registry.convert("/tmp", Path)
    """

    def __init__(self, include_builtins: bool = True):
        """Initialize converter registry.

        Args:
            include_builtins: Whether to pre-register str, int, float, bool,
                Decimal and Locale converters.
        """
        self._converters: Dict[Any, Converter] = (
            builtin_converters() if include_builtins else {}
        )
        self._lock = Lock()

    def register(self, target_type: Any, converter: Converter) -> None:
        """Register or replace the converter for a target type.

        Args:
            target_type: Type produced by the converter.
            converter: Callable parsing a string; it should raise ValueError
                or TypeError when rejecting input.
        """
        with self._lock:
            converters = dict(self._converters)
            converters[target_type] = converter
            self._converters = converters
        logger.debug(
            "converter_registered",
            target_type=getattr(target_type, "__name__", repr(target_type)),
        )

    def unregister(self, target_type: Any) -> None:
        with self._lock:
            converters = dict(self._converters)
            converters.pop(target_type, None)
            self._converters = converters

    def has_converter(self, target_type: Any) -> bool:
        return target_type in self._converters

    def convert(self, value: Any, target_type: Any) -> Any:
        """Convert a value to target_type.

        Values that already are instances of target_type are returned
        unchanged; other non-string values are converted from str(value).

        Args:
            value: Raw or formatted resource value.
            target_type: Requested type.

        Returns:
            Converted value.

        Raises:
            ConversionError: If no converter is registered or it rejects the input.
        """
        # bool is an int subclass but True is not a valid int resource
        if isinstance(value, bool) and target_type is int:
            return int(value)
        if isinstance(target_type, type) and isinstance(value, target_type):
            return value

        converter = self._converters.get(target_type)
        if converter is None:
            raise ConversionError(value, target_type, "no converter registered")

        raw = value if isinstance(value, str) else str(value)
        try:
            return converter(raw)
        except (ValueError, TypeError) as e:
            reason = (str(e).splitlines() or [None])[0]
            raise ConversionError(value, target_type, reason) from e
