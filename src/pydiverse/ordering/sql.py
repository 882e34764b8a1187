# Copyright (c) QuantCo and pydiverse contributors 2025-2025
# SPDX-License-Identifier: BSD-3-Clause
from __future__ import annotations

import sqlalchemy as sqa

from ._internal.backend.sql import SqlImpl, get_impl
from ._internal.order import Order

__all__ = ["SqlImpl", "get_impl", "order_by"]


def order_by(
    query: sqa.Select,
    *by: sqa.ColumnElement | tuple[sqa.ColumnElement, Order | str],
    dialect: str | sqa.Engine | sqa.engine.Dialect | None = None,
) -> sqa.Select:
    """
    Adds an `ORDER BY` clause for the given orderings to `query`.

    See `SqlImpl.order_by`. `dialect` is anything accepted by `get_impl`. Without a
    dialect, the generic implementation is used.
    """
    impl = SqlImpl if dialect is None else get_impl(dialect)
    return impl.order_by(query, *by)
