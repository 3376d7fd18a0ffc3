"""Tests for infrastructure.resources.store module."""

import threading

import pytest

from infrastructure.resources import (
    Locale,
    MappingResourceStore,
    ReloadableResourceStore,
)
from infrastructure.resources.models import ENGLISH, FRENCH, ROOT


@pytest.mark.unit
class TestMappingResourceStore:
    """Tests for the immutable in-memory store."""

    def test_lookup_exact_locale_only(self, resource_entries):
        store = MappingResourceStore(resource_entries)

        assert store.lookup("key.integer", ENGLISH) == "42"
        assert store.lookup("key.integer", FRENCH) is None
        assert store.lookup("key.integer", Locale("en", "US")) is None

    def test_nested_entries_flattened(self):
        store = MappingResourceStore({"en": {"key": {"proverb": "text"}}})
        assert store.lookup("key.proverb", ENGLISH) == "text"

    def test_locale_keys_accept_locale_and_tags(self):
        store = MappingResourceStore({ENGLISH: {"a": "1"}, "en": {"b": "2"}, "": {"c": "3"}})

        assert store.keys(ENGLISH) == frozenset({"a", "b"})
        assert store.lookup("c", ROOT) == "3"
        assert store.locales() == frozenset({ENGLISH, ROOT})

    def test_contains(self, resource_entries):
        store = MappingResourceStore(resource_entries)

        assert store.contains("key.proverb", FRENCH)
        assert not store.contains("key.integer", FRENCH)

    def test_input_is_copied(self):
        entries = {"en": {"key": "before"}}
        store = MappingResourceStore(entries)

        entries["en"]["key"] = "after"

        assert store.lookup("key", ENGLISH) == "before"

    def test_partitions_read_only(self, resource_entries):
        store = MappingResourceStore(resource_entries)

        with pytest.raises(TypeError):
            store._partitions[ENGLISH]["key.integer"] = "0"

    def test_as_dict_returns_copy(self, resource_entries):
        store = MappingResourceStore(resource_entries)
        copy = store.as_dict()
        copy[ENGLISH]["key.integer"] = "0"

        assert store.lookup("key.integer", ENGLISH) == "42"

    def test_basename(self):
        assert MappingResourceStore({}, basename="labels").basename == "labels"


@pytest.mark.unit
class TestReloadableResourceStore:
    """Tests for snapshot swapping."""

    def test_delegates_to_current(self, resource_entries):
        store = ReloadableResourceStore(MappingResourceStore(resource_entries))

        assert store.lookup("key.integer", ENGLISH) == "42"
        assert "key.proverb" in store.keys(FRENCH)
        assert store.basename == "messages"

    def test_swap_replaces_snapshot(self, resource_entries):
        initial = MappingResourceStore(resource_entries)
        store = ReloadableResourceStore(initial)
        replacement = MappingResourceStore({"en": {"key.integer": "43"}}, basename="v2")

        previous = store.swap(replacement)

        assert previous is initial
        assert store.current is replacement
        assert store.lookup("key.integer", ENGLISH) == "43"
        assert store.basename == "v2"

    def test_readers_see_complete_snapshots(self):
        """Concurrent readers only observe whole snapshots."""
        old = MappingResourceStore({"en": {"a": "old", "b": "old"}})
        new = MappingResourceStore({"en": {"a": "new", "b": "new"}})
        store = ReloadableResourceStore(old)
        torn = []

        def reader():
            for _ in range(2000):
                snapshot = store.current
                pair = (snapshot.lookup("a", ENGLISH), snapshot.lookup("b", ENGLISH))
                if pair[0] != pair[1]:
                    torn.append(pair)

        threads = [threading.Thread(target=reader) for _ in range(4)]
        for thread in threads:
            thread.start()
        for i in range(200):
            store.swap(new if i % 2 == 0 else old)
        for thread in threads:
            thread.join()

        assert torn == []
