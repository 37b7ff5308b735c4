"""Unit tests for the loose/strict equality helpers."""

import math

import pytest

from treesuite.domain.equality import (
    Kind,
    is_composite,
    kind_of,
    loose_equals,
    strict_equals,
    to_number,
    to_string,
)


@pytest.mark.parametrize(
    ("value", "kind"),
    [
        (None, Kind.NULL),
        (True, Kind.BOOLEAN),
        (0, Kind.NUMBER),
        (1.5, Kind.NUMBER),
        ("x", Kind.STRING),
        ([], Kind.OBJECT),
        ({}, Kind.OBJECT),
        (object(), Kind.OBJECT),
    ],
)
def test_kind_of(value, kind):
    """Values are classified into the five comparison kinds; bool is not a number."""
    assert kind_of(value) is kind


def test_none_counts_as_composite():
    """None is serialized like any object in structural comparisons."""
    assert is_composite(None)
    assert is_composite([1])
    assert not is_composite("1")
    assert not is_composite(False)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, 0),
        (True, 1),
        (False, 0),
        (7, 7),
        ("  42 ", 42),
        ("", 0),
        ("1e3", 1000),
        ("0x10", 16),
        ("-Infinity", -math.inf),
        ([5], 5),
        ([], 0),
    ],
)
def test_to_number(value, expected):
    """Values coerce to numbers like a numeric conversion in the browser would."""
    assert to_number(value) == expected


@pytest.mark.parametrize("value", ["abc", "1_000", "inf", [1, 2], {"a": 1}])
def test_to_number_nan(value):
    """Non-numeric strings and objects coerce to NaN."""
    assert math.isnan(to_number(value))


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, "null"),
        (True, "true"),
        (1.0, "1"),
        (1.5, "1.5"),
        (math.nan, "NaN"),
        ([1, None, "a"], "1,,a"),
        ({"a": 1}, "[object Object]"),
    ],
)
def test_to_string(value, expected):
    """Primitive string forms follow the browser's conversions."""
    assert to_string(value) == expected


class TestLooseEquals:
    """Tests for loose (abstract) equality."""

    @staticmethod
    @pytest.mark.parametrize(
        ("a", "b"),
        [
            (1, "1"),
            (0, ""),
            (1, True),
            ("1", True),
            (0, False),
            (None, None),
            ([1], 1),
            ([1, 2], "1,2"),
            (1, 1.0),
        ],
    )
    def test_equal(a, b):
        """Primitives of different kinds are coerced before comparing."""
        assert loose_equals(a, b)
        assert loose_equals(b, a)

    @staticmethod
    @pytest.mark.parametrize(
        ("a", "b"),
        [
            (None, 0),
            (None, False),
            (None, ""),
            ([1, 2, 3], [1, 2, 3]),
            ({"a": 1}, {"a": 1}),
            (math.nan, math.nan),
            ("a", 1),
            (2, True),
        ],
    )
    def test_not_equal(a, b):
        """None only equals None, objects compare by identity, NaN never equals."""
        assert not loose_equals(a, b)
        assert not loose_equals(b, a)

    @staticmethod
    def test_same_object_is_equal():
        """An object is loosely equal to itself."""
        numbers = [1, 2, 3]
        assert loose_equals(numbers, numbers)


class TestStrictEquals:
    """Tests for strict equality."""

    @staticmethod
    def test_different_kinds_never_equal():
        """Values of different kinds are never strictly equal."""
        assert not strict_equals(1, "1")
        assert not strict_equals(1, True)
        assert not strict_equals(0, None)

    @staticmethod
    def test_same_kind_compares_values():
        """Primitives of the same kind compare by value; int and float are both numbers."""
        assert strict_equals("a", "a")
        assert strict_equals(1, 1.0)
        assert strict_equals(None, None)
        assert not strict_equals(math.nan, math.nan)

    @staticmethod
    def test_objects_compare_by_identity():
        """Objects are only strictly equal to themselves."""
        numbers = [1, 2, 3]
        assert strict_equals(numbers, numbers)
        assert not strict_equals(numbers, [1, 2, 3])
