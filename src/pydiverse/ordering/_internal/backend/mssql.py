# Copyright (c) QuantCo and pydiverse contributors 2025-2025
# SPDX-License-Identifier: BSD-3-Clause
from __future__ import annotations

import sqlalchemy as sqa

from pydiverse.ordering._internal.backend.sql import SqlImpl
from pydiverse.ordering._internal.order import Order


class MsSqlImpl(SqlImpl):
    backend_name = "mssql"

    @classmethod
    def default_collation(cls):
        return "Latin1_General_bin"

    @classmethod
    def random(cls) -> sqa.ColumnElement:
        return sqa.func.newid()

    @classmethod
    def compile_nulls(
        cls, order_expr: sqa.UnaryExpression, order: Order
    ) -> sqa.UnaryExpression:
        # SQL Server has no NULLS FIRST / NULLS LAST. It treats null as the smallest
        # value, which already puts nulls first for `asc` and last for `desc`.
        return order_expr
