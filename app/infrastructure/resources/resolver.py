"""Resource resolver for looking up, formatting and converting resources.

Core component of the resource engine: walks the locale candidate chain over
a ResourceStore, formats templates with positional arguments and converts
the result through the ConverterRegistry.
"""

from typing import Any, FrozenSet, Optional, Set, Union

from infrastructure.logging import get_module_logger
from infrastructure.resources.converters import ConverterRegistry
from infrastructure.resources.exceptions import ConversionError
from infrastructure.resources.formatting import Arguments, format_template
from infrastructure.resources.locales import LocaleFallbackResolver
from infrastructure.resources.models import Locale
from infrastructure.resources.result import ResolutionResult, ResolutionStatus
from infrastructure.resources.store import ResourceStore

logger = get_module_logger()


class _Missing:
    """Marker type for an absent default value."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()

LocaleLike = Union[Locale, str, None]


class ResourceResolver:
    """Strict resource lookup with formatting and type conversion.

    Every lookup variant (with or without locale, arguments or default) is a
    keyword combination of resolve() or resolve_converted(). Without a
    default, a miss raises NoSuchResourceError; with one, the default is
    returned (resolve) or converted (resolve_converted).

    Attributes:
        store: ResourceStore holding the raw templates.
        converters: ConverterRegistry used by the converted variants.
        fallback: LocaleFallbackResolver computing candidate chains.
    """

    def __init__(
        self,
        store: ResourceStore,
        converters: Optional[ConverterRegistry] = None,
        fallback: Optional[LocaleFallbackResolver] = None,
    ):
        self.store = store
        self.converters = converters or ConverterRegistry()
        self.fallback = fallback or LocaleFallbackResolver()

    @property
    def basename(self) -> str:
        return self.store.basename

    def try_resolve(
        self,
        key: str,
        args: Optional[Arguments] = None,
        locale: LocaleLike = None,
    ) -> ResolutionResult:
        """Look up and format a resource without raising.

        Args:
            key: Resource key.
            args: Positional sequence or named mapping for placeholders.
            locale: Requested locale; None uses the default locale.

        Returns:
            ResolutionResult with the formatted value or NOT_FOUND.
        """
        locales = self.fallback.candidates(locale)
        for candidate in locales:
            value = self.store.lookup(key, candidate)
            if value is None:
                continue
            if candidate != locales[0]:
                logger.debug(
                    "resolved_from_fallback_locale",
                    key=key,
                    requested_locale=str(locales[0]),
                    fallback_locale=str(candidate),
                )
            if isinstance(value, str):
                value = format_template(value, args)
            return ResolutionResult.success(key, value, locales, candidate)

        logger.debug(
            "resource_not_found",
            key=key,
            locales=[str(c) for c in locales],
        )
        return ResolutionResult.not_found(key, locales)

    def try_resolve_converted(
        self,
        key: str,
        target_type: Any,
        args: Optional[Arguments] = None,
        locale: LocaleLike = None,
    ) -> ResolutionResult:
        """Look up, format and convert a resource without raising.

        Returns:
            ResolutionResult with the converted value, NOT_FOUND, or
            CONVERSION_ERROR.
        """
        result = self.try_resolve(key, args=args, locale=locale)
        if not result.is_success:
            return result
        try:
            converted = self.converters.convert(result.value, target_type)
        except ConversionError as e:
            logger.warning(
                "resource_conversion_failed",
                key=key,
                target_type=getattr(target_type, "__name__", repr(target_type)),
                error=str(e),
            )
            return ResolutionResult.conversion_failed(
                key, e, result.locales, result.locale
            )
        return ResolutionResult.success(key, converted, result.locales, result.locale)

    def resolve(
        self,
        key: str,
        args: Optional[Arguments] = None,
        locale: LocaleLike = None,
        default: Any = MISSING,
    ) -> str:
        """Resolve and format a resource as text.

        Args:
            key: Resource key.
            args: Placeholder arguments; empty returns the raw template.
            locale: Requested locale; None uses the default locale.
            default: Value returned unmodified when the key is missing.

        Returns:
            The formatted template, or the default on a miss.

        Raises:
            NoSuchResourceError: If the key is missing and no default was given.
        """
        result = self.try_resolve(key, args=args, locale=locale)
        if not result.is_success and default is not MISSING:
            return default
        value = result.unwrap()
        return value if isinstance(value, str) else str(value)

    def resolve_converted(
        self,
        key: str,
        target_type: Any,
        args: Optional[Arguments] = None,
        locale: LocaleLike = None,
        default: Any = MISSING,
    ) -> Any:
        """Resolve, format and convert a resource.

        Args:
            key: Resource key.
            target_type: Requested type, e.g. int.
            args: Placeholder arguments.
            locale: Requested locale; None uses the default locale.
            default: Converted and returned when the key is missing.

        Returns:
            The converted value.

        Raises:
            NoSuchResourceError: If the key is missing and no default was given.
            ConversionError: If the resolved value or the default cannot be converted.
        """
        result = self.try_resolve_converted(
            key, target_type, args=args, locale=locale
        )
        if result.status == ResolutionStatus.NOT_FOUND and default is not MISSING:
            return self.converters.convert(default, target_type)
        return result.unwrap()

    def resolve_value(self, key: str, locale: LocaleLike = None) -> Any:
        """Return the raw stored value without formatting or conversion.

        Raises:
            NoSuchResourceError: If no candidate locale holds the key.
        """
        locales = self.fallback.candidates(locale)
        for candidate in locales:
            value = self.store.lookup(key, candidate)
            if value is not None:
                return value
        return ResolutionResult.not_found(key, locales).unwrap()

    def format_resource(self, template: str, args: Optional[Arguments] = None) -> str:
        return format_template(template, args)

    def contains_key(self, key: str, locale: LocaleLike = None) -> bool:
        return any(
            self.store.contains(key, candidate)
            for candidate in self.fallback.candidates(locale)
        )

    def get_keys(self, locale: LocaleLike = None) -> FrozenSet[str]:
        """Return every key resolvable for a locale across its candidate chain."""
        keys: Set[str] = set()
        for candidate in self.fallback.candidates(locale):
            keys.update(self.store.keys(candidate))
        return frozenset(keys)
