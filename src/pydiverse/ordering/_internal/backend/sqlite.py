# Copyright (c) QuantCo and pydiverse contributors 2025-2025
# SPDX-License-Identifier: BSD-3-Clause
from __future__ import annotations

from pydiverse.ordering._internal.backend.sql import SqlImpl


class SqliteImpl(SqlImpl):
    backend_name = "sqlite"

    @classmethod
    def default_collation(cls):
        return "BINARY"
