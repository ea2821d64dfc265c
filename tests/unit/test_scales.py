"""Tests for scale value resolution."""

import pytest

from styled_native.scales import (
    KeyedScale,
    OrderedScale,
    as_scale,
    negate,
    parse_numeral,
    resolve_scale_value,
)

SPACE = [0, 4, 8, 16, 32, 64, 128, 256, "512"]


class TestScaleShapes:
    """Tests for wrapping raw theme data."""

    def test_list_is_ordered(self):
        assert as_scale([1, 2]) == OrderedScale([1, 2])

    def test_tuple_is_ordered(self):
        assert isinstance(as_scale((1, 2)), OrderedScale)

    def test_mapping_is_keyed(self):
        assert isinstance(as_scale({"a": 1}), KeyedScale)

    @pytest.mark.parametrize("raw", [None, "abc", 12, 1.5])
    def test_other_values_are_not_scales(self, raw):
        assert as_scale(raw) is None

    def test_ordered_lookup_ignores_strings(self):
        """Strings never index an ordered scale."""
        assert resolve_scale_value(SPACE, "2") == 2
        assert resolve_scale_value(SPACE, "auto") == "auto"


class TestNumbers:
    """Tests for numeric values."""

    def test_index_into_ordered_scale(self):
        assert resolve_scale_value(SPACE, 3) == 16

    def test_out_of_range_index_is_raw(self):
        assert resolve_scale_value(SPACE, 42) == 42

    def test_fractional_value_is_raw(self):
        assert resolve_scale_value(SPACE, 1.5) == 1.5

    def test_integral_float_indexes(self):
        assert resolve_scale_value(SPACE, 2.0) == 8

    def test_number_as_key(self):
        assert resolve_scale_value({2: "two"}, 2) == "two"

    def test_number_as_string_key(self):
        """Keyed scales loaded from files use string keys."""
        assert resolve_scale_value({"2": "two"}, 2) == "two"

    def test_missing_key_is_raw(self):
        assert resolve_scale_value({"thin": 1}, 3) == 3

    def test_no_scale_is_raw(self):
        assert resolve_scale_value(None, 3) == 3

    def test_none_entry_counts_as_miss(self):
        assert resolve_scale_value([None, 4], 0) == 0

    def test_bool_is_not_a_number(self):
        assert resolve_scale_value(SPACE, True) is True

    def test_accepts_wrapped_scale(self):
        assert resolve_scale_value(OrderedScale(SPACE), 1) == 4


class TestNegativeNumbers:
    """Tests for negative values."""

    def test_negates_numeric_entry(self):
        assert resolve_scale_value(SPACE, -3) == -16

    def test_prefixes_string_entry(self):
        assert resolve_scale_value(SPACE, -8) == "-512"

    def test_strips_existing_minus(self):
        assert resolve_scale_value(["-0.01em"], -0) == "-0.01em"
        assert resolve_scale_value(["x", "-0.01em"], -1) == "0.01em"

    def test_negative_keyed_lookup(self):
        assert resolve_scale_value({"2": 10}, -2) == -10

    def test_negative_raw_fallback(self):
        assert resolve_scale_value(SPACE, -100) == -100

    def test_negative_without_scale(self):
        assert resolve_scale_value(None, -3) == -3

    def test_negate_leaves_objects(self):
        value = {"width": 1}
        assert negate(value) is value


class TestStrings:
    """Tests for string values."""

    def test_key_lookup(self):
        assert resolve_scale_value({"primary": "tomato"}, "primary") == "tomato"

    def test_key_lookup_wins_over_numeral(self):
        assert resolve_scale_value({"600": "heavy"}, "600") == "heavy"

    def test_numeral_miss_coerces(self):
        assert resolve_scale_value({"thin": 1}, "2") == 2

    def test_numeral_miss_without_coercion(self):
        assert resolve_scale_value({"bold": "600"}, "600", coerce_numerals=False) == "600"

    def test_negative_numeral_string(self):
        assert resolve_scale_value(None, "-4") == -4

    def test_non_numeral_passes_through(self):
        assert resolve_scale_value({"thin": 1}, "line-through") == "line-through"

    @pytest.mark.parametrize(
        ("text", "expected"),
        [("2", 2), ("-3", -3), ("1.5", 1.5), ("-0.25", -0.25), ("1.", None), (".5", None), ("1e3", None), ("", None)],
    )
    def test_parse_numeral(self, text, expected):
        assert parse_numeral(text) == expected


class TestOtherValues:
    """Tests for values that are never resolved."""

    def test_mapping_passes_through(self):
        value = {"width": 1, "height": 1}
        assert resolve_scale_value({"a": 1}, value) is value

    def test_list_passes_through(self):
        value = [1, 2]
        assert resolve_scale_value(SPACE, value) is value

    def test_none_passes_through(self):
        assert resolve_scale_value(SPACE, None) is None


class TestNestedKeys:
    """Tests for dotted keys into nested keyed scales."""

    def test_dotted_key_into_nested_scale(self):
        colors = {"blue": ["#eef", "#ccf", "#99f", "#66f"]}
        assert resolve_scale_value(colors, "blue.3") == "#66f"

    def test_flat_dotted_key_wins(self):
        assert resolve_scale_value({"1.5": "flat", "1": {"5": "nested"}}, "1.5") == "flat"

    def test_missing_nested_key_passes_through(self):
        assert resolve_scale_value({"blue": ["#eef"]}, "blue.9") == "blue.9"

    def test_missing_nested_numeral_coerces(self):
        assert resolve_scale_value({"space": {}}, "1.5") == 1.5
