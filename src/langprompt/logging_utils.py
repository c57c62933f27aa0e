# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Logger configuration for command-line use."""

from __future__ import annotations

import logging
import sys
from typing import Final

PACKAGE_LOGGER: Final[str] = "langprompt"
_CONFIGURED_FLAG: Final[str] = "_langprompt_verbose_configured"


def configure_verbose_logging() -> logging.Logger:
    """Stream debug records from the package logger to stderr.

    Idempotent: repeated calls do not attach additional handlers.
    """

    logger = logging.getLogger(PACKAGE_LOGGER)
    if getattr(logger, _CONFIGURED_FLAG, False):
        return logger
    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    setattr(logger, _CONFIGURED_FLAG, True)
    return logger


__all__ = ["PACKAGE_LOGGER", "configure_verbose_logging"]
