"""Message source for retrieving formatted text messages.

A text-only façade over ResourceResolver for callers that never need type
conversion.
"""

from typing import Any, FrozenSet, Optional

from infrastructure.logging import get_module_logger
from infrastructure.resources.exceptions import NoSuchResourceError
from infrastructure.resources.formatting import Arguments
from infrastructure.resources.resolver import MISSING, LocaleLike, ResourceResolver
from infrastructure.resources.result import ResolutionResult

logger = get_module_logger()


class NoSuchMessageError(NoSuchResourceError):
    """Raised when a message key has no template in any candidate locale."""

    pass


class MessageSource:
    """Service for resolving messages with positional or named arguments.

    Lookup, fallback and default semantics are exactly those of
    ResourceResolver.resolve(); misses raise NoSuchMessageError.

    Attributes:
        resolver: Underlying ResourceResolver.
    """

    def __init__(self, resolver: ResourceResolver):
        self.resolver = resolver

    @property
    def basename(self) -> str:
        return self.resolver.basename

    def get_message(
        self,
        key: str,
        args: Optional[Arguments] = None,
        locale: LocaleLike = None,
        default: Any = MISSING,
    ) -> str:
        """Retrieve and format a message.

        Args:
            key: Message key.
            args: Placeholder arguments; empty returns the raw template.
            locale: Requested locale; None uses the default locale.
            default: Returned unmodified when the key is missing.

        Returns:
            Formatted message, or the default on a miss.

        Raises:
            NoSuchMessageError: If the key is missing and no default was given.
        """
        try:
            return self.resolver.resolve(key, args=args, locale=locale, default=default)
        except NoSuchResourceError as e:
            raise NoSuchMessageError(e.key, e.locales) from e

    def try_get_message(
        self,
        key: str,
        args: Optional[Arguments] = None,
        locale: LocaleLike = None,
    ) -> ResolutionResult:
        return self.resolver.try_resolve(key, args=args, locale=locale)

    def format_message(self, template: str, args: Optional[Arguments] = None) -> str:
        return self.resolver.format_resource(template, args)

    def contains_key(self, key: str, locale: LocaleLike = None) -> bool:
        return self.resolver.contains_key(key, locale)

    def get_keys(self, locale: LocaleLike = None) -> FrozenSet[str]:
        return self.resolver.get_keys(locale)


def create_message_source(
    resolver: Optional[ResourceResolver] = None,
) -> MessageSource:
    """Create a MessageSource.

    Args:
        resolver: Resolver to delegate to (default: an empty resolver built
            by the resources factory).

    Returns:
        MessageSource: Configured message source
    """
    if resolver is None:
        from infrastructure.resources.factory import create_resource_resolver

        resolver = create_resource_resolver()
    logger.info("message_source_created", basename=resolver.basename)
    return MessageSource(resolver)
