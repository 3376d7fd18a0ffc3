"""Resource store interface and implementations.

A store is an already-populated, locale-partitioned mapping from key to raw
template. How it was loaded is irrelevant here; stores only answer
"does (key, locale) exist, and if so what is its raw value".
"""

from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Mapping, Optional, Union

from infrastructure.logging import get_module_logger
from infrastructure.resources.models import Locale

logger = get_module_logger()


class ResourceStore(ABC):
    """Abstract base for resource stores.

    Implementations must be safe for concurrent reads; no resolution call
    mutates a store.
    """

    basename: str = "messages"

    @abstractmethod
    def lookup(self, key: str, locale: Locale) -> Optional[Any]:
        """Return the raw value stored for key in exactly this locale.

        Args:
            key: Resource key.
            locale: Locale partition to read; no fallback is applied.

        Returns:
            The raw value, or None if the pair is absent.
        """
        pass

    @abstractmethod
    def keys(self, locale: Locale) -> FrozenSet[str]:
        """Return all keys stored for exactly this locale."""
        pass

    @abstractmethod
    def locales(self) -> FrozenSet[Locale]:
        """Return the locales that hold at least one key."""
        pass

    def contains(self, key: str, locale: Locale) -> bool:
        return self.lookup(key, locale) is not None


def _flatten(data: Mapping[str, Any], prefix: str = "") -> Dict[str, Any]:
    """Flatten nested mappings into dot-separated keys."""
    items: Dict[str, Any] = {}
    for key, value in data.items():
        full_key = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, Mapping):
            items.update(_flatten(value, full_key))
        else:
            items[full_key] = value
    return items


class MappingResourceStore(ResourceStore):
    """Immutable store backed by in-memory mappings.

    Expects entries shaped as {locale: {key: value}}; locale keys may be
    Locale instances or tags ("en", "en_US", "" for root). Nested
    dictionaries are flattened, so {"key": {"proverb": "..."}} is stored
    under "key.proverb". The input is copied, later changes to it are not
    observed.

    Attributes:
        basename: Name of the bundle this store represents.
    """

    def __init__(
        self,
        entries: Optional[Mapping[Union[Locale, str], Mapping[str, Any]]] = None,
        basename: str = "messages",
    ):
        self.basename = basename
        partitions: Dict[Locale, Mapping[str, Any]] = {}
        for locale_key, messages in (entries or {}).items():
            locale = Locale.coerce(locale_key)
            merged = dict(partitions.get(locale, {}))
            merged.update(_flatten(messages))
            partitions[locale] = MappingProxyType(merged)
        self._partitions: Mapping[Locale, Mapping[str, Any]] = MappingProxyType(
            partitions
        )

        logger.info(
            "initialized_mapping_store",
            basename=basename,
            locale_count=len(partitions),
            key_count=sum(len(p) for p in partitions.values()),
        )

    def lookup(self, key: str, locale: Locale) -> Optional[Any]:
        partition = self._partitions.get(locale)
        if partition is None:
            return None
        return partition.get(key)

    def keys(self, locale: Locale) -> FrozenSet[str]:
        return frozenset(self._partitions.get(locale, {}))

    def locales(self) -> FrozenSet[Locale]:
        return frozenset(self._partitions)

    def as_dict(self) -> Dict[Locale, Dict[str, Any]]:
        """Return a mutable copy of the stored entries."""
        return {locale: dict(p) for locale, p in self._partitions.items()}


class ReloadableResourceStore(ResourceStore):
    """Store that delegates to a swappable immutable snapshot.

    Reloading builds a complete new store and installs it with swap(); the
    swap is a single reference assignment, so readers see either the old or
    the new snapshot and never a partial update.
    """

    def __init__(self, initial: ResourceStore):
        self._current = initial

    @property
    def current(self) -> ResourceStore:
        """The snapshot readers currently see."""
        return self._current

    @property
    def basename(self) -> str:  # type: ignore[override]
        return self._current.basename

    def swap(self, new_store: ResourceStore) -> ResourceStore:
        """Install a new snapshot.

        Args:
            new_store: Fully built store to publish.

        Returns:
            The snapshot that was replaced.
        """
        previous = self._current
        self._current = new_store
        logger.info(
            "resource_store_swapped",
            basename=new_store.basename,
            locale_count=len(new_store.locales()),
        )
        return previous

    def lookup(self, key: str, locale: Locale) -> Optional[Any]:
        return self._current.lookup(key, locale)

    def keys(self, locale: Locale) -> FrozenSet[str]:
        return self._current.keys(locale)

    def locales(self) -> FrozenSet[Locale]:
        return self._current.locales()

    def contains(self, key: str, locale: Locale) -> bool:
        return self._current.contains(key, locale)
