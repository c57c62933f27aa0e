# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Protocol definitions for collaborators consumed by the pipeline."""

from __future__ import annotations

from .environment import Environment, KeyValueCache

__all__ = ["Environment", "KeyValueCache"]
