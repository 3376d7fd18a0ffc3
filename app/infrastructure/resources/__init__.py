"""Resource system - lookup, formatting, conversion and injection of resources.

Resolves symbolic keys against a locale-partitioned store with deterministic
locale fallback, substitutes positional arguments, converts text to typed
values, and injects resolved values into annotated object members.

Main components:
- models: Locale and the process default locale
- store: ResourceStore, MappingResourceStore, ReloadableResourceStore
- locales: LocaleFallbackResolver
- converters: ConverterRegistry
- resolver: ResourceResolver (strict lookup API)
- members: InjectedResource, injected_resource, MemberSource
- injector: ResourceInjector (lenient injection)
"""

from infrastructure.resources.converters import ConverterRegistry
from infrastructure.resources.exceptions import (
    ConversionError,
    NoSuchResourceError,
    ResourceError,
)
from infrastructure.resources.factory import (
    create_resource_injector,
    create_resource_resolver,
    create_resource_store,
)
from infrastructure.resources.formatting import format_template
from infrastructure.resources.injector import ResourceInjector
from infrastructure.resources.locales import LocaleFallbackResolver
from infrastructure.resources.members import (
    AnnotatedMember,
    InjectedResource,
    IntrospectionMemberSource,
    MemberKind,
    MemberSource,
    ancestor_chain,
    injected_resource,
)
from infrastructure.resources.models import (
    Locale,
    get_default_locale,
    set_default_locale,
)
from infrastructure.resources.resolver import MISSING, ResourceResolver
from infrastructure.resources.result import ResolutionResult, ResolutionStatus
from infrastructure.resources.store import (
    MappingResourceStore,
    ReloadableResourceStore,
    ResourceStore,
)

__all__ = [
    "Locale",
    "get_default_locale",
    "set_default_locale",
    "ResourceError",
    "NoSuchResourceError",
    "ConversionError",
    "ResourceStore",
    "MappingResourceStore",
    "ReloadableResourceStore",
    "LocaleFallbackResolver",
    "ConverterRegistry",
    "format_template",
    "ResolutionResult",
    "ResolutionStatus",
    "ResourceResolver",
    "MISSING",
    "InjectedResource",
    "injected_resource",
    "AnnotatedMember",
    "MemberKind",
    "MemberSource",
    "IntrospectionMemberSource",
    "ancestor_chain",
    "ResourceInjector",
    "create_resource_store",
    "create_resource_resolver",
    "create_resource_injector",
]
