"""Shared fixtures for the resource engine test suite."""

import pytest

from infrastructure.resources import (
    ResourceResolver,
    create_resource_resolver,
    set_default_locale,
)
from infrastructure.resources.models import ENGLISH


@pytest.fixture(autouse=True)
def english_default_locale():
    """Pin the process default locale to English for each test."""
    previous = set_default_locale(ENGLISH)
    yield ENGLISH
    set_default_locale(previous)


@pytest.fixture
def resource_entries():
    """Sample store contents partitioned by locale."""
    return {
        "en": {
            "key.proverb": "An {0} a day keeps the {1} away",
            "key.integer": "42",
            "key.greeting": "Hello {name}",
            "key.only_english": "english only",
        },
        "fr": {
            "key.proverb": "Une {0} par jour éloigne le {1}",
            "key.only_french": "français seulement",
        },
        "fr_CA": {
            "key.only_quebec": "québécois seulement",
        },
    }


@pytest.fixture
def resolver(resource_entries) -> ResourceResolver:
    """ResourceResolver over the sample entries."""
    return create_resource_resolver(resource_entries)
