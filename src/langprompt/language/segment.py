# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Language segment combining enablement, version resolution and link rendering."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Final

from ..errors import CommandFailedError, VersionParseError
from ..interfaces import Environment
from ..properties import DisplayMode, SegmentProperties
from .extractor import VersionExtractor
from .matcher import matches_extensions, matches_folders
from .models import SegmentState, VersionCommand
from .reconciler import VersionFileMatcher, reconcile_version
from .resolver import resolve_command
from .url import render_version_url, select_url_template

LOGGER = logging.getLogger(__name__)

NO_VERSION_TEXT: Final[str] = "NO VERSION"


class LanguageSegment:
    """Decide whether a language segment renders and which version it shows.

    A segment is built fresh for every prompt evaluation. :meth:`enabled`
    performs the whole pipeline once and leaves the outcome on :attr:`state`:
    a version (``state.full``), an error (``state.error``), or neither when
    version fetching is disabled.
    """

    def __init__(
        self,
        *,
        name: str,
        env: Environment,
        properties: SegmentProperties | None = None,
        extensions: Sequence[str] = (),
        folders: Sequence[str] = (),
        commands: Sequence[VersionCommand] = (),
        version_url_template: str = "",
        matches_version_file: VersionFileMatcher | None = None,
        in_context: Callable[[], bool] | None = None,
    ) -> None:
        """Initialise the segment.

        Args:
            name: Language identifier used in log records.
            env: Environment providing filesystem, process and cache access.
            properties: User configuration; defaults when omitted.
            extensions: Glob patterns marking the language's files.
            folders: Marker directories marking the language.
            commands: Version candidates in priority order.
            version_url_template: Segment-level default link template.
            matches_version_file: Optional expected-version supplier.
            in_context: Optional hook reporting an active language context
                such as a virtual environment.
        """

        self.name = name
        self.state = SegmentState()
        self._env = env
        self._props = properties or SegmentProperties()
        self._extensions = tuple(self._props.extensions if self._props.extensions is not None else extensions)
        self._folders = tuple(self._props.folders if self._props.folders is not None else folders)
        self._commands = tuple(commands)
        self._version_url_template = version_url_template
        self.matches_version_file = matches_version_file
        self._in_context = in_context

    @property
    def properties(self) -> SegmentProperties:
        """Return the effective properties of this segment."""

        return self._props

    def enabled(self) -> bool:
        """Return ``True`` when the segment should render, resolving its version.

        The home directory and the display-mode trigger are the only reasons a
        segment is suppressed. Once eligible it stays enabled even when no
        version could be determined.
        """

        if self._in_home() and not self._props.home_enabled:
            LOGGER.debug("%s: suppressed in home directory", self.name)
            return False
        if not self._triggered():
            LOGGER.debug("%s: display trigger %s not met", self.name, self._props.display_mode.value)
            return False
        if self._props.fetch_version:
            self._resolve_version()
        reconcile_version(self.state, self.matches_version_file)
        return True

    def _in_home(self) -> bool:
        return Path(self._env.pwd()) == Path(self._env.home())

    def _has_language_files(self) -> bool:
        return matches_extensions(self._env, self._extensions) or matches_folders(self._env, self._folders)

    def _context_active(self) -> bool:
        return self._in_context is not None and self._in_context()

    def _triggered(self) -> bool:
        mode = self._props.display_mode
        if mode is DisplayMode.ALWAYS:
            return True
        if mode is DisplayMode.ENVIRONMENT:
            return self._context_active()
        if mode is DisplayMode.CONTEXT:
            return self._context_active() or self._has_language_files()
        return self._has_language_files()

    def _resolve_version(self) -> None:
        command = resolve_command(self._env, self._commands)
        if command is None:
            self.state.error = self._props.missing_command_text or NO_VERSION_TEXT
            return

        extractor = VersionExtractor(self._env, cache_ttl=self._props.cache_duration)
        try:
            info = extractor.extract(command)
        except CommandFailedError as exc:
            self.state.error = self._props.missing_command_text or str(exc)
            self.state.exit_code = exc.exit_code
            return
        except VersionParseError as exc:
            self.state.error = str(exc)
            return

        self.state.apply_version(info, command.executable)
        template = select_url_template(
            self._props.version_url_template,
            command.version_url_template,
            self._version_url_template,
        )
        self.state.url = render_version_url(template, self.state)


__all__ = ["LanguageSegment", "NO_VERSION_TEXT"]
