# Copyright (c) QuantCo and pydiverse contributors 2025-2025
# SPDX-License-Identifier: BSD-3-Clause
from __future__ import annotations

from pydiverse.ordering._internal.backend.sql import SqlImpl


class DuckDbImpl(SqlImpl):
    backend_name = "duckdb"

    @classmethod
    def default_collation(cls):
        # strings already compare bytewise in UTF-8, i.e. by code point
        return None
