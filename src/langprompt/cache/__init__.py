# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Cache implementations backing version memoisation."""

from __future__ import annotations

from .file import FileCache, default_cache_dir
from .memory import MemoryCache

__all__ = ["FileCache", "MemoryCache", "default_cache_dir"]
