# Copyright (c) QuantCo and pydiverse contributors 2025-2025
# SPDX-License-Identifier: BSD-3-Clause
from __future__ import annotations

import enum
import functools
from collections.abc import Callable
from typing import Any

from pydiverse.ordering._internal.errors import (
    IncomparableOperands,
    UnsupportedMarkerUse,
    check_literal_value,
)
from pydiverse.ordering._internal.numeric import compare_numbers, is_number

__all__ = ["Order"]


def canonical(value: Any) -> Any:
    """
    Replaces an enum member by its name.

    Keys of heterogeneous maps often mix enum members and their plain string form.
    Both must compare equal, so members are compared by name.
    """
    if isinstance(value, enum.Enum):
        return value.name
    return value


def _compare_nulls_first(first, second) -> int:
    if first is None:
        return 0 if second is None else -1
    if second is None:
        return 1

    try:
        if first < second:
            return -1
        if second < first:
            return 1
    except TypeError as e:
        raise IncomparableOperands(
            f"cannot order `{type(first).__name__}` and `{type(second).__name__}`\n"
            f"The values {first!r} and {second!r} have no mutual ordering."
        ) from e
    return 0


class Order(enum.Enum):
    """
    The ways the sort stage of a query can order values.

    `asc` and `desc` are comparators over arbitrary values: numbers are compared
    by value regardless of their representation, enum members by their name and
    everything else with `<`. `None` is placed first by `asc` and last by `desc`.

    `shuffle` is a marker. It tells the caller to apply a random permutation and
    cannot be used to compare values.
    """

    shuffle = "shuffle"
    asc = "asc"
    desc = "desc"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, name: str | Order) -> Order:
        """
        Looks up an ordering by its name. Names are case-sensitive.
        """
        if isinstance(name, Order):
            return name
        check_literal_value((o.value for o in cls), "Order.parse", "name", name)
        return cls(name)

    @property
    def is_marker(self) -> bool:
        return self is Order.shuffle

    @property
    def descending(self) -> bool:
        return self is Order.desc

    @property
    def nulls_last(self) -> bool | None:
        if self is Order.shuffle:
            return None
        return self is Order.desc

    def reversed(self) -> Order:
        if self is Order.asc:
            return Order.desc
        if self is Order.desc:
            return Order.asc
        return Order.shuffle

    def compare(self, first: Any, second: Any) -> int:
        """
        Compares two values.

        :return: A negative number if `first` comes before `second` in this order,
            a positive number if it comes after and 0 if both are equal.
        :raises UnsupportedMarkerUse: if called on `Order.shuffle`.
        :raises IncomparableOperands: if the values have no mutual ordering.
        """
        if self is Order.shuffle:
            raise UnsupportedMarkerUse(
                "`Order.shuffle` cannot be used as a comparator\n"
                "It is a marker only. hint: apply a random permutation instead of "
                "sorting, e.g. with `random.shuffle`."
            )

        first, second = canonical(first), canonical(second)
        # desc swaps the operands instead of negating the result
        if self is Order.desc:
            first, second = second, first

        if is_number(first) and is_number(second):
            return compare_numbers(first, second)
        return _compare_nulls_first(first, second)

    def key(self) -> Callable[[Any], Any]:
        """
        A sort key for `sorted` and `list.sort` that orders values like `compare`.
        """
        if self is Order.shuffle:
            raise UnsupportedMarkerUse(
                "`Order.shuffle` cannot be used as a sort key\n"
                "hint: check `Order.is_marker` before sorting."
            )
        return functools.cmp_to_key(self.compare)
