# Copyright (c) QuantCo and pydiverse contributors 2025-2025
# SPDX-License-Identifier: BSD-3-Clause
from __future__ import annotations

from pydiverse.ordering._internal.errors import (
    IncomparableOperands,
    NotSupportedError,
    UnsupportedMarkerUse,
)

__all__ = ["IncomparableOperands", "NotSupportedError", "UnsupportedMarkerUse"]
