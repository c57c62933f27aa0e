# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Built-in language segments."""

from __future__ import annotations

from .catalog import BUILTIN_LANGUAGES, LanguageDefinition, build_segment, get_definition

__all__ = ["BUILTIN_LANGUAGES", "LanguageDefinition", "build_segment", "get_definition"]
