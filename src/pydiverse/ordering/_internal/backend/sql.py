# Copyright (c) QuantCo and pydiverse contributors 2025-2025
# SPDX-License-Identifier: BSD-3-Clause
from __future__ import annotations

import sqlalchemy as sqa
import structlog

from pydiverse.ordering._internal.errors import check_arg_type
from pydiverse.ordering._internal.order import Order

__all__ = ["SqlImpl", "get_impl"]


class SqlImpl:
    """
    Translates orderings to SQL `ORDER BY` clauses.

    This class implements the behaviour shared by most dialects. Dialect specific
    deviations live in subclasses, which are looked up by `get_impl`.
    """

    backend_name = "sql"

    @classmethod
    def default_collation(cls) -> str | None:
        return "POSIX"

    @classmethod
    def random(cls) -> sqa.ColumnElement:
        return sqa.func.random()

    @classmethod
    def compile_nulls(
        cls, order_expr: sqa.UnaryExpression, order: Order
    ) -> sqa.UnaryExpression:
        return order_expr.nulls_last() if order.nulls_last else order_expr.nulls_first()

    @classmethod
    def compile_order(
        cls, expr: sqa.ColumnElement, order: Order
    ) -> sqa.ColumnElement:
        check_arg_type(Order, "compile_order", "order", order)
        if order.is_marker:
            return cls.random()

        # Enums are ordered by their name, not by their position in the declaration.
        if isinstance(expr.type, sqa.Enum):
            expr = sqa.cast(expr, sqa.String())
        if isinstance(expr.type, sqa.String) and (
            collation := cls.default_collation()
        ):
            expr = expr.collate(collation)

        order_expr = expr.desc() if order.descending else expr.asc()
        return cls.compile_nulls(order_expr, order)

    @classmethod
    def order_by(
        cls,
        query: sqa.Select,
        *by: sqa.ColumnElement | tuple[sqa.ColumnElement, Order | str],
    ) -> sqa.Select:
        """
        Adds an `ORDER BY` clause to `query`.

        Every element of `by` is either a column (sorted ascending) or a pair of a
        column and an ordering. If any of the orderings is `Order.shuffle`, the rows
        are ordered randomly.
        """
        if len(by) == 0:
            raise TypeError("`order_by` requires at least one column to sort by")

        logger = structlog.get_logger(__name__)
        orders = []
        for item in by:
            if isinstance(item, tuple):
                expr, order = item
                orders.append((expr, Order.parse(order)))
            else:
                orders.append((item, Order.asc))

        if any(order.is_marker for _, order in orders):
            logger.debug("ordering query randomly", backend=cls.backend_name)
            return query.order_by(cls.random())

        logger.debug(
            "ordering query",
            backend=cls.backend_name,
            orders=[str(order) for _, order in orders],
        )
        return query.order_by(
            *(cls.compile_order(expr, order) for expr, order in orders)
        )


def get_impl(dialect: str | sqa.Engine | sqa.engine.Dialect) -> type[SqlImpl]:
    """
    Returns the implementation for a dialect.

    `dialect` may be an engine, a dialect, a dialect name (e.g. `"postgresql"`) or a
    database URL. Unknown dialects get the generic implementation.
    """
    if isinstance(dialect, sqa.Engine):
        name = dialect.dialect.name
    elif isinstance(dialect, sqa.engine.Dialect):
        name = dialect.name
    elif isinstance(dialect, str):
        name = sqa.make_url(dialect).get_backend_name() if "://" in dialect else dialect
    else:
        raise TypeError(
            "argument for parameter `dialect` of `get_impl` must be an engine, a "
            f"dialect or a string, found `{type(dialect).__name__}` instead"
        )

    # We don't want to import any SQL impls we don't use, so the mapping
    # name -> impl class is defined here.

    if name == "sqlite":
        from .sqlite import SqliteImpl

        return SqliteImpl
    elif name == "mssql":
        from .mssql import MsSqlImpl

        return MsSqlImpl
    elif name == "duckdb":
        from .duckdb import DuckDbImpl

        return DuckDbImpl

    return SqlImpl
