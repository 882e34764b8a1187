# Copyright (c) QuantCo and pydiverse contributors 2025-2025
# SPDX-License-Identifier: BSD-3-Clause
from __future__ import annotations

import decimal
import fractions
import math
import numbers
from typing import Any

import numpy as np

__all__ = ["is_number", "compare_numbers"]


def is_number(value: Any) -> bool:
    """
    Whether `value` is ordered by its numeric value.

    Booleans are not numbers here, even though `bool` subclasses `int`. numpy
    scalars register themselves with the `numbers` ABCs, `Decimal` does not.
    """
    if isinstance(value, bool | np.bool_):
        return False
    return isinstance(value, numbers.Real | decimal.Decimal)


def _is_nan(value) -> bool:
    if isinstance(value, decimal.Decimal):
        # also catches signaling NaNs, which raise on any comparison
        return value.is_nan()
    if isinstance(value, float):
        return math.isnan(value)
    return False


def _exact(value):
    # Python compares int, float, Decimal and Fraction exactly against each other.
    # numpy scalars don't (e.g. np.float32(x) == 2**60 + 1 goes through a float),
    # so we unwrap them first.
    if isinstance(value, np.integer):
        return int(value)
    if isinstance(value, np.floating):
        if not np.isfinite(value):
            return float(value)
        return fractions.Fraction(*value.as_integer_ratio())
    return value


def compare_numbers(first, second) -> int:
    """
    Three-way comparison of two numbers by their mathematical value.

    The operands may have different representations (`int`, `float`, `Decimal`,
    `Fraction`, numpy scalars of any width). No operand is ever rounded to a
    fixed-width float, so e.g. ``2**53 + 1`` is greater than ``float(2**53)``.

    NaN is greater than any other number and equal to any other NaN, which
    makes this a total order. Negative and positive zero are equal.

    :return: -1 if `first` is smaller, 0 if both are equal, 1 otherwise.
    """
    if not is_number(first) or not is_number(second):
        raise TypeError(
            "`compare_numbers` requires two numbers, found "
            f"`{type(first).__name__}` and `{type(second).__name__}`"
        )

    first, second = _exact(first), _exact(second)
    first_nan, second_nan = _is_nan(first), _is_nan(second)
    if first_nan or second_nan:
        return int(first_nan) - int(second_nan)

    if first < second:
        return -1
    if second < first:
        return 1
    return 0
