# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rendering of documentation links for a resolved version."""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from typing import Final

from jinja2 import Environment as JinjaEnvironment
from jinja2 import StrictUndefined, Template, TemplateError

from .models import SegmentState

LOGGER = logging.getLogger(__name__)

_TAG_PATTERN: Final[re.Pattern[str]] = re.compile(r"\{\{.*?\}\}|\{%.*?%\}", re.DOTALL)
# ``.Full`` style field access; a dot after a name, bracket or call is attribute access.
_FIELD_DOT_PATTERN: Final[re.Pattern[str]] = re.compile(r"(?<![\w)\]])\.(?=[A-Za-z_])")

_JINJA: Final[JinjaEnvironment] = JinjaEnvironment(undefined=StrictUndefined, autoescape=False)


def select_url_template(user_template: str, command_template: str, default_template: str) -> str:
    """Return the first non-empty template: user, then candidate, then segment default."""

    return user_template or command_template or default_template


def _translate_field_access(template: str) -> str:
    return _TAG_PATTERN.sub(lambda tag: _FIELD_DOT_PATTERN.sub("", tag.group(0)), template)


@lru_cache(maxsize=64)
def _compile(template: str) -> Template:
    return _JINJA.from_string(_translate_field_access(template))


def render_version_url(template: str, state: SegmentState) -> str:
    """Render ``template`` with the fields of ``state``.

    Both ``{{ .Full }}`` and ``{{ Full }}`` reference styles are accepted.
    Syntax errors, unknown fields and expressions that fail while rendering
    yield an empty string.
    """

    if not template:
        return ""
    try:
        return _compile(template).render(state.template_context())
    except (TemplateError, TypeError, ValueError, ArithmeticError, LookupError, AttributeError) as exc:
        LOGGER.debug("unable to render url template %r: %s", template, exc)
        return ""


__all__ = ["render_version_url", "select_url_template"]
