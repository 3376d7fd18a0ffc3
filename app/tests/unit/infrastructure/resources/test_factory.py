"""Tests for infrastructure.resources.factory module."""

import pytest

from infrastructure.resources import (
    ConverterRegistry,
    MappingResourceStore,
    ReloadableResourceStore,
    ResourceInjector,
    ResourceResolver,
    create_resource_injector,
    create_resource_resolver,
    create_resource_store,
)
from infrastructure.resources.models import ENGLISH


@pytest.mark.unit
class TestFactory:
    """Tests for factory functions."""

    def test_create_resource_store_defaults(self, resource_entries):
        store = create_resource_store(resource_entries)

        assert isinstance(store, MappingResourceStore)
        assert store.basename == "messages"

    def test_create_reloadable_store(self, resource_entries):
        store = create_resource_store(resource_entries, basename="ui", reloadable=True)

        assert isinstance(store, ReloadableResourceStore)
        assert store.basename == "ui"
        assert store.lookup("key.integer", ENGLISH) == "42"

    def test_create_resource_resolver_from_entries(self, resource_entries):
        resolver = create_resource_resolver(resource_entries)

        assert isinstance(resolver, ResourceResolver)
        assert resolver.resolve("key.integer") == "42"

    def test_create_resource_resolver_with_store_and_converters(self, resource_entries):
        store = create_resource_store(resource_entries)
        converters = ConverterRegistry()

        resolver = create_resource_resolver(store=store, converters=converters)

        assert resolver.store is store
        assert resolver.converters is converters

    def test_resolver_sees_swapped_store(self, resource_entries):
        store = create_resource_store(resource_entries, reloadable=True)
        resolver = create_resource_resolver(store=store)

        store.swap(MappingResourceStore({"en": {"key.integer": "7"}}))

        assert resolver.resolve_converted("key.integer", int) == 7

    def test_create_resource_injector(self, resolver):
        injector = create_resource_injector(resolver)

        assert isinstance(injector, ResourceInjector)
        assert injector.resolver is resolver
