# Copyright (c) QuantCo and pydiverse contributors 2025-2025
# SPDX-License-Identifier: BSD-3-Clause
from __future__ import annotations

from collections.abc import Iterable
from typing import Any


class NotSupportedError(Exception):
    """
    Signals operations that are not supported by an ordering or a backend.
    """


class UnsupportedMarkerUse(NotSupportedError):
    """
    Raised when a marker ordering (i.e. `Order.shuffle`) is used as a comparator.

    This always indicates a bug in the caller. A marker only tells the sort stage
    that it has to apply a random permutation.
    """


class IncomparableOperands(TypeError):
    """
    Raised when two non-null values without a mutual ordering are compared.
    """


# Our error message format: The first line is in lowercase letters, without a dot at
# the end. More detail is given in the following lines in normal english sentences.
# To give advice to to the user, we write `hint: ...`.


def check_arg_type(
    expected_type: type,
    fn: str,
    param_name: str,
    arg: Any,
):
    if not isinstance(arg, expected_type):
        raise TypeError(
            f"argument for parameter `{param_name}` of `{fn}` must have type "
            f"`{expected_type.__name__}`, found `{type(arg).__name__}` instead"
        )


def check_literal_value(
    allowed_vals: Iterable[Any], fn: str, param_name: str, arg: Any
):
    allowed_vals = list(allowed_vals)
    if arg not in allowed_vals:
        raise ValueError(
            f"argument `{arg!r}` not allowed for parameter `{param_name}` of `{fn}`, "
            "must be one of " + ", ".join(repr(val) for val in allowed_vals)
        )
