"""Tests for infrastructure.resources.formatting module."""

import pytest

from infrastructure.resources import format_template

PROVERB_FORMAT = "An {0} a day keeps the {1} away"


@pytest.mark.unit
class TestFormatTemplate:
    """Tests for placeholder substitution."""

    def test_positional_arguments(self):
        assert format_template(PROVERB_FORMAT, ["apple", "doctor"]) == (
            "An apple a day keeps the doctor away"
        )

    def test_order_sensitive(self):
        assert format_template(PROVERB_FORMAT, ("doctor", "apple")) == (
            "An doctor a day keeps the apple away"
        )

    @pytest.mark.parametrize("args", [None, [], ()])
    def test_empty_arguments_return_template(self, args):
        assert format_template(PROVERB_FORMAT, args) == PROVERB_FORMAT

    def test_missing_index_left_verbatim(self):
        assert format_template(PROVERB_FORMAT, ["apple"]) == (
            "An apple a day keeps the {1} away"
        )

    def test_repeated_placeholder(self):
        assert format_template("{0} and {0}", ["x"]) == "x and x"

    def test_non_string_arguments(self):
        assert format_template("Count: {0}", [42]) == "Count: 42"

    def test_single_string_argument(self):
        assert format_template("Hello {0}", "world") == "Hello world"

    def test_named_arguments(self):
        assert format_template("Hello {name}, {0}", {"name": "Ada"}) == (
            "Hello Ada, {0}"
        )

    def test_extra_arguments_ignored(self):
        assert format_template("{0}", ["a", "b"]) == "a"
