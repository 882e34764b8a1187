# Copyright (c) QuantCo and pydiverse contributors 2025-2025
# SPDX-License-Identifier: BSD-3-Clause
from __future__ import annotations

from ._internal.backend.polars import arrange, compile_order

__all__ = ["arrange", "compile_order"]
