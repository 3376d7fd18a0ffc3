"""Tests for infrastructure.resources.converters module."""

from decimal import Decimal
from pathlib import Path

import pytest

from infrastructure.resources import ConversionError, ConverterRegistry, Locale


@pytest.fixture
def registry():
    return ConverterRegistry()


@pytest.mark.unit
class TestBuiltinConverters:
    """Tests for the built-in converters."""

    def test_identity_for_text(self, registry):
        assert registry.convert("An {0} a day", str) == "An {0} a day"

    def test_integer(self, registry):
        assert registry.convert("42", int) == 42
        assert registry.convert(" -7 ", int) == -7

    def test_float(self, registry):
        assert registry.convert("3.5", float) == 3.5

    def test_bool(self, registry):
        assert registry.convert("true", bool) is True
        assert registry.convert("false", bool) is False

    def test_decimal(self, registry):
        assert registry.convert("1.10", Decimal) == Decimal("1.10")

    def test_locale(self, registry):
        assert registry.convert("fr_CA", Locale) == Locale("fr", "CA")

    def test_instance_of_target_returned_unchanged(self, registry):
        assert registry.convert(21, int) == 21

    def test_non_string_value_converted_from_text(self, registry):
        assert registry.convert(21, str) == "21"
        assert registry.convert(21, float) == 21.0

    def test_rejected_input_raises(self, registry):
        with pytest.raises(ConversionError) as exc_info:
            registry.convert("forty-two", int)

        assert exc_info.value.value == "forty-two"
        assert exc_info.value.target_type is int
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_missing_converter_raises(self, registry):
        with pytest.raises(ConversionError) as exc_info:
            registry.convert("/tmp", Path)

        assert exc_info.value.reason == "no converter registered"


@pytest.mark.unit
class TestConverterRegistration:
    """Tests for extending the registry."""

    def test_register_custom_converter(self, registry):
        registry.register(Path, Path)

        assert registry.has_converter(Path)
        assert registry.convert("/tmp", Path) == Path("/tmp")

    def test_register_replaces_existing(self, registry):
        registry.register(int, lambda value: int(value, 16))
        assert registry.convert("ff", int) == 255

    def test_unregister(self, registry):
        registry.unregister(int)

        assert not registry.has_converter(int)
        with pytest.raises(ConversionError):
            registry.convert("42", int)

    def test_without_builtins(self):
        registry = ConverterRegistry(include_builtins=False)
        assert not registry.has_converter(str)

    def test_converter_type_error_wrapped(self, registry):
        def reject(value):
            raise TypeError("unsupported")

        registry.register(complex, reject)

        with pytest.raises(ConversionError):
            registry.convert("1+2j", complex)

    def test_converter_error_without_message_wrapped(self, registry):
        def reject(value):
            raise ValueError()

        registry.register(complex, reject)

        with pytest.raises(ConversionError) as exc_info:
            registry.convert("1+2j", complex)

        assert exc_info.value.reason is None


@pytest.mark.unit
class TestBooleanValues:
    """Typed bool values are not mistaken for integers."""

    def test_bool_to_int_yields_integer(self, registry):
        result = registry.convert(True, int)

        assert result == 1
        assert type(result) is int

    def test_bool_to_bool_unchanged(self, registry):
        assert registry.convert(False, bool) is False
