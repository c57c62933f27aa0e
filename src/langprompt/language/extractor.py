# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run version candidates and parse their output, memoised through the environment cache."""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..errors import CommandError, CommandFailedError, LangPromptError
from ..interfaces import Environment
from .models import VersionCommand, VersionInfo

LOGGER = logging.getLogger(__name__)


class VersionExtractor:
    """Produce :class:`VersionInfo` for a candidate.

    Raw command output is cached under :meth:`VersionCommand.cache_key` for
    ``cache_ttl`` seconds after a successful parse. A non-positive TTL bypasses
    the cache entirely. Failures are never cached and never retried.
    """

    def __init__(self, env: Environment, *, cache_ttl: int) -> None:
        self._env = env
        self._cache_ttl = cache_ttl

    def extract(self, command: VersionCommand) -> VersionInfo:
        """Return the version reported by ``command``.

        Args:
            command: Candidate selected by the resolver.

        Returns:
            VersionInfo: Parsed version components.

        Raises:
            CommandFailedError: If the command (or getter) failed.
            VersionParseError: If the output does not match the candidate pattern.
        """

        if command.getter is not None:
            return command.parse(self._run_getter(command, command.getter))

        key = command.cache_key()
        use_cache = self._cache_ttl > 0
        if use_cache:
            cached, found = self._env.cache().get(key)
            if found:
                LOGGER.debug("cache hit for %s", key)
                return command.parse(cached)

        output = self._run(command)
        info = command.parse(output)
        if use_cache:
            self._env.cache().set(key, output, self._cache_ttl)
        return info

    def _run(self, command: VersionCommand) -> str:
        try:
            return self._env.run_command(command.executable, command.args)
        except CommandError as exc:
            LOGGER.debug("%s exited with %s", command.executable, exc.exit_code)
            raise CommandFailedError(command.executable, command.args, exc.exit_code) from exc

    @staticmethod
    def _run_getter(command: VersionCommand, getter: Callable[[], str]) -> str:
        try:
            return getter()
        except LangPromptError as exc:
            LOGGER.debug("version getter for %s failed: %s", command.executable, exc)
            raise CommandFailedError(command.executable, command.args) from exc


__all__ = ["VersionExtractor"]
