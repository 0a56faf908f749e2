# Copyright 2026 structserde Contributors
# SPDX-License-Identifier: Apache-2.0

"""Structured loggers for structserde.

Loggers are structlog bound loggers wrapping plain stdlib loggers. The
library never installs handlers or touches the global structlog
configuration; events reach the application's logging setup under the
``structserde.*`` logger names.
"""

from __future__ import annotations

import logging
from typing import Any

import structlog

# ###############
# Public Interface
# ###############


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structured logger bound to the stdlib logger *name*.

    Usage:
        log = get_logger(__name__)
        log.debug("struct.deserialize", target="Point")
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        cache_logger_on_first_use=True,
    )


# ################
# Implementation
# ################

_PROCESSORS: list[Any] = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.format_exc_info,
    structlog.processors.KeyValueRenderer(key_order=["event"], sort_keys=True),
]
