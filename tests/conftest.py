# Copyright (c) QuantCo and pydiverse contributors 2025-2025
# SPDX-License-Identifier: BSD-3-Clause
import logging

from pydiverse.common.util.structlog import setup_logging

# Setup

setup_logging(log_level=logging.INFO)
