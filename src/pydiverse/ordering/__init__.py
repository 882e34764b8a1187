# Copyright (c) QuantCo and pydiverse contributors 2025-2025
# SPDX-License-Identifier: BSD-3-Clause

from ._internal.numeric import compare_numbers, is_number
from ._internal.order import Order
from .errors import *
from .errors import __all__ as __errors
from .version import __version__

__all__ = ["__version__", "Order", "compare_numbers", "is_number"] + __errors
