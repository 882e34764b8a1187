# Copyright (c) QuantCo and pydiverse contributors 2025-2025
# SPDX-License-Identifier: BSD-3-Clause
from __future__ import annotations

import uuid
from typing import TypeVar

import polars as pl
import structlog

from pydiverse.ordering._internal.errors import UnsupportedMarkerUse, check_arg_type
from pydiverse.ordering._internal.order import Order

__all__ = ["compile_order", "arrange"]

Frame = TypeVar("Frame", pl.DataFrame, pl.LazyFrame)


def key_dtype(df: pl.DataFrame | pl.LazyFrame, col: str | pl.Expr) -> pl.DataType:
    expr = pl.col(col) if isinstance(col, str) else col
    return df.lazy().select(expr).collect_schema().dtypes()[0]


def compile_order(
    col: str | pl.Expr, order: Order, dtype: pl.DataType | None = None
) -> tuple[pl.Expr, bool, bool]:
    """
    Translates an ordering into the arguments of `DataFrame.sort`.

    `dtype` is the type `col` evaluates to. Enum and categorical values are sorted
    by their string value instead of their physical order.
    """
    check_arg_type(Order, "compile_order", "order", order)
    if order.is_marker:
        raise UnsupportedMarkerUse(
            "`Order.shuffle` cannot be compiled to a sort key\n"
            "hint: use `arrange`, which shuffles the whole frame."
        )

    expr = pl.col(col) if isinstance(col, str) else col
    if isinstance(dtype, (pl.Enum, pl.Categorical)):
        expr = expr.cast(pl.String)

    return expr, order.descending, order.nulls_last


def arrange(
    df: Frame,
    *by: str | pl.Expr | tuple[str | pl.Expr, Order | str],
    seed: int | None = None,
) -> Frame:
    """
    Sorts a polars frame.

    Every element of `by` is either a column (sorted ascending) or a pair of a
    column and an ordering. The sort is stable. If any of the orderings is
    `Order.shuffle`, the rows are put into a random permutation instead, which
    is reproducible when a `seed` is given.
    """
    if len(by) == 0:
        raise TypeError("`arrange` requires at least one column to sort by")

    logger = structlog.get_logger(__name__)
    orders = []
    for item in by:
        if isinstance(item, tuple):
            col, order = item
            orders.append((col, Order.parse(order)))
        else:
            orders.append((item, Order.asc))

    if any(order.is_marker for _, order in orders):
        logger.debug("shuffling frame", seed=seed)
        # A single permutation applied to all columns. `DataFrame.sample` would do
        # this too, but it does not exist on lazy frames.
        perm = f"__perm_{uuid.uuid4().hex}"
        return (
            df.with_columns(pl.int_range(0, pl.len()).shuffle(seed=seed).alias(perm))
            .sort(perm)
            .drop(perm)
        )

    order_by, descending, nulls_last = zip(
        *[compile_order(col, order, key_dtype(df, col)) for col, order in orders],
        strict=True,
    )
    logger.debug(
        "sorting frame",
        order_by=[str(o) for o in order_by],
        descending=descending,
        nulls_last=nulls_last,
    )
    return df.sort(
        list(order_by),
        descending=list(descending),
        nulls_last=list(nulls_last),
        maintain_order=True,
    )
