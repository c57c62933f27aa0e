# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Selection of the first available version candidate."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..interfaces import Environment
from .models import VersionCommand

LOGGER = logging.getLogger(__name__)


def resolve_command(env: Environment, commands: Iterable[VersionCommand]) -> VersionCommand | None:
    """Return the first candidate available on the system.

    Candidates are tried in declaration order, which encodes priority (for
    example a version manager shim ahead of the bare interpreter). Getter
    candidates need no executable and are always available.

    Args:
        env: Environment used to look up executables.
        commands: Ordered candidates.

    Returns:
        VersionCommand | None: The selected candidate, or ``None`` when none is present.
    """

    for command in commands:
        if command.getter is not None or env.has_command(command.executable):
            LOGGER.debug("selected %s", command.executable)
            return command
        LOGGER.debug("%s not found, trying next candidate", command.executable)
    return None


__all__ = ["resolve_command"]
