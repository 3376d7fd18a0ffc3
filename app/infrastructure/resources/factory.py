"""Factory functions for creating resource engine components.

Provides convenience functions for wiring stores, resolvers and injectors
with the default configuration.
"""

from typing import Any, Mapping, Optional, Union

from infrastructure.configuration import settings
from infrastructure.logging import get_module_logger
from infrastructure.resources.converters import ConverterRegistry
from infrastructure.resources.injector import ResourceInjector
from infrastructure.resources.members import MemberSource
from infrastructure.resources.models import Locale
from infrastructure.resources.resolver import ResourceResolver
from infrastructure.resources.store import (
    MappingResourceStore,
    ReloadableResourceStore,
    ResourceStore,
)

logger = get_module_logger()

Entries = Mapping[Union[Locale, str], Mapping[str, Any]]


def create_resource_store(
    entries: Optional[Entries] = None,
    basename: Optional[str] = None,
    reloadable: bool = False,
) -> ResourceStore:
    """Create a store from in-memory entries.

    Args:
        entries: {locale: {key: value}} mapping.
        basename: Bundle name (default: settings.resources.basename).
        reloadable: Wrap the store so it can be swapped later.

    Returns:
        MappingResourceStore, or a ReloadableResourceStore around one.
    """
    store: ResourceStore = MappingResourceStore(
        entries or {},
        basename=basename or settings.resources.basename,
    )
    if reloadable:
        return ReloadableResourceStore(store)
    return store


def create_resource_resolver(
    entries: Optional[Entries] = None,
    store: Optional[ResourceStore] = None,
    converters: Optional[ConverterRegistry] = None,
) -> ResourceResolver:
    """Create a ResourceResolver.

    Args:
        entries: Entries for a new store; ignored when store is given.
        store: Pre-built store.
        converters: Custom converter registry (default: built-ins).

    Returns:
        ResourceResolver: Configured resolver instance

    Usage:
        resolver = create_resource_resolver(
            {"en": {"key.proverb": "An {0} a day keeps the {1} away"}}
        )
        resolver.resolve("key.proverb", args=["apple", "doctor"])
    """
    if store is None:
        store = create_resource_store(entries)

    resolver = ResourceResolver(store=store, converters=converters)
    logger.info(
        "resource_resolver_created",
        basename=store.basename,
        locale_count=len(store.locales()),
    )
    return resolver


def create_resource_injector(
    resolver: ResourceResolver,
    member_source: Optional[MemberSource] = None,
) -> ResourceInjector:
    return ResourceInjector(resolver=resolver, member_source=member_source)
