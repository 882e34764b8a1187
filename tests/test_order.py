# Copyright (c) QuantCo and pydiverse contributors 2025-2025
# SPDX-License-Identifier: BSD-3-Clause
from __future__ import annotations

import enum
import itertools
from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest

from pydiverse.ordering import (
    IncomparableOperands,
    NotSupportedError,
    Order,
    UnsupportedMarkerUse,
)


class Token(enum.Enum):
    id = 1
    label = 2
    key = 3


class Color(enum.IntEnum):
    RED = 1
    BLUE = 2


NUMBERS = [
    -7,
    0,
    2.5,
    3,
    2**53 + 1,
    float(2**53),
    Decimal("2.4999999999999999999"),
    Fraction(5, 2),
    np.int32(-8),
    np.float32(0.25),
]


def exact(x) -> Fraction:
    if isinstance(x, np.generic):
        x = x.item()
    return Fraction(x)


def sign(x) -> int:
    return (x > 0) - (x < 0)


def test_members():
    assert [o.value for o in Order] == ["shuffle", "asc", "desc"]
    assert [str(o) for o in Order] == ["shuffle", "asc", "desc"]
    assert Order.asc is Order("asc")


class TestReversed:
    def test_reversed(self):
        assert Order.asc.reversed() is Order.desc
        assert Order.desc.reversed() is Order.asc
        assert Order.shuffle.reversed() is Order.shuffle

    @pytest.mark.parametrize("order", list(Order))
    def test_involution(self, order):
        assert order.reversed().reversed() is order


class TestParse:
    @pytest.mark.parametrize("order", list(Order))
    def test_parse(self, order):
        assert Order.parse(order.value) is order
        assert Order.parse(order) is order

    @pytest.mark.parametrize("name", ["ASC", "Desc", "ascending", "", " asc", 1])
    def test_invalid(self, name):
        with pytest.raises(ValueError, match="must be one of 'shuffle', 'asc'"):
            Order.parse(name)


class TestShuffle:
    @pytest.mark.parametrize(
        "first, second", [(None, None), (1, 2), ("a", "a"), (Token.id, "id")]
    )
    def test_compare_fails(self, first, second):
        with pytest.raises(UnsupportedMarkerUse):
            Order.shuffle.compare(first, second)

    def test_key_fails(self):
        with pytest.raises(NotSupportedError):
            Order.shuffle.key()

    def test_flags(self):
        assert Order.shuffle.is_marker
        assert not Order.asc.is_marker and not Order.desc.is_marker
        assert Order.shuffle.nulls_last is None
        assert not Order.shuffle.descending


class TestNumbers:
    @pytest.mark.parametrize("first, second", itertools.product(NUMBERS, NUMBERS))
    def test_antisymmetric(self, first, second):
        for order in (Order.asc, Order.desc):
            assert order.compare(first, second) == -order.compare(second, first)

    @pytest.mark.parametrize("first, second", itertools.product(NUMBERS, NUMBERS))
    def test_matches_exact_value(self, first, second):
        expected = sign(exact(first) - exact(second))
        assert Order.asc.compare(first, second) == expected
        assert Order.desc.compare(first, second) == -expected

    def test_mixed_representation_equal(self):
        assert Order.asc.compare(3, 3.0) == 0
        assert Order.desc.compare(3, 3.0) == 0
        assert Order.asc.compare(2**53 + 1, Decimal(2**53 + 1)) == 0
        assert Order.asc.compare(2**53 + 1, float(2**53)) > 0
        assert Order.desc.compare(2**53 + 1, float(2**53)) < 0

    def test_nan(self):
        nan = float("nan")
        assert Order.asc.compare(nan, nan) == 0
        assert Order.asc.compare(nan, float("inf")) > 0
        assert Order.desc.compare(nan, float("inf")) < 0


class TestNulls:
    @pytest.mark.parametrize(
        "value", [0, -(10**30), "", "a", Token.id, Decimal("-Infinity"), (1,)]
    )
    def test_placement(self, value):
        assert Order.asc.compare(None, value) < 0
        assert Order.asc.compare(value, None) > 0
        assert Order.desc.compare(None, value) > 0
        assert Order.desc.compare(value, None) < 0

    def test_both_null(self):
        assert Order.asc.compare(None, None) == 0
        assert Order.desc.compare(None, None) == 0

    def test_sort(self):
        values = [None, 5, 2, None, 8]
        assert sorted(values, key=Order.asc.key()) == [None, None, 2, 5, 8]
        assert sorted(values, key=Order.desc.key()) == [8, 5, 2, None, None]


class TestText:
    def test_lexicographic(self):
        assert Order.asc.compare("a", "b") < 0
        assert Order.asc.compare("b", "a") > 0
        assert Order.asc.compare("B", "a") < 0  # by code point
        assert Order.asc.compare("ab", "abc") < 0
        assert Order.desc.compare("a", "b") > 0
        assert Order.desc.compare("x", "x") == 0

    def test_sort(self):
        values = ["pear", None, "apple", "Zebra", "banana"]
        assert sorted(values, key=Order.asc.key()) == [
            None,
            "Zebra",
            "apple",
            "banana",
            "pear",
        ]
        assert sorted(values, key=Order.desc.key()) == [
            "pear",
            "banana",
            "apple",
            "Zebra",
            None,
        ]


class TestEnums:
    @pytest.mark.parametrize("order", [Order.asc, Order.desc])
    @pytest.mark.parametrize("member", list(Token) + list(Color))
    def test_equal_to_name(self, order, member):
        assert order.compare(member, member.name) == 0
        assert order.compare(member.name, member) == 0
        assert order.compare(member, member) == 0

    def test_compared_by_name(self):
        # by value RED comes first, by name BLUE does
        assert Order.asc.compare(Color.RED, Color.BLUE) > 0
        assert Order.asc.compare(Token.key, Token.label) < 0
        assert Order.asc.compare(Token.label, "id") > 0
        assert Order.desc.compare(Token.label, "id") < 0

    def test_int_enum_is_not_a_number(self):
        # IntEnum members are ints, but they are ordered by name
        with pytest.raises(IncomparableOperands):
            Order.asc.compare(Color.RED, 10)

    def test_order_member(self):
        assert Order.asc.compare(Order.desc, "desc") == 0

    def test_map_keys(self):
        keys = [Token.label, "value", Token.id, "age"]
        assert sorted(keys, key=Order.asc.key()) == [
            "age",
            Token.id,
            Token.label,
            "value",
        ]


class TestIncomparable:
    @pytest.mark.parametrize(
        "first, second",
        [
            ("a", 1),
            (1, "a"),
            (Decimal(1), "1"),
            (Token.id, 1),
            ({"a": 1}, {"a": 1}),
            (object(), object()),
            ((1, "a"), (1, 2)),
        ],
    )
    def test_incomparable(self, first, second):
        for order in (Order.asc, Order.desc):
            with pytest.raises(IncomparableOperands) as exc_info:
                order.compare(first, second)
            assert isinstance(exc_info.value, TypeError)
            assert isinstance(exc_info.value.__cause__, TypeError)

    def test_same_type_objects(self):
        assert Order.asc.compare((1, "a"), (1, "b")) < 0
        assert Order.desc.compare((1, "a"), (1, "b")) > 0

    def test_booleans(self):
        assert Order.asc.compare(False, True) < 0
        assert Order.desc.compare(False, True) > 0
        assert Order.asc.compare(None, False) < 0
