# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Host-backed :class:`~langprompt.interfaces.Environment` implementation."""

from __future__ import annotations

import logging
import os
import shutil
from collections.abc import Mapping, Sequence
from pathlib import Path

from .cache import MemoryCache
from .interfaces import KeyValueCache
from .process_utils import run_command

LOGGER = logging.getLogger(__name__)


def _any_file(directory: Path, pattern: str) -> bool:
    try:
        return any(path.is_file() for path in directory.glob(pattern))
    except (OSError, ValueError):
        return False


class ShellEnvironment:
    """Environment backed by the real filesystem, ``PATH`` and subprocesses."""

    def __init__(
        self,
        *,
        cwd: Path | None = None,
        home: Path | None = None,
        cache: KeyValueCache | None = None,
        env: Mapping[str, str] | None = None,
        timeout: float | None = None,
    ) -> None:
        self._cwd = (cwd or Path.cwd()).resolve()
        self._home = (home or Path.home()).resolve()
        self._cache = cache if cache is not None else MemoryCache()
        self._env = dict(env) if env is not None else dict(os.environ)
        self._timeout = timeout
        self._commands: dict[str, bool] = {}

    def has_files(self, pattern: str) -> bool:
        return _any_file(self._cwd, pattern)

    def has_folder(self, name: str) -> bool:
        return (self._cwd / name).is_dir()

    def has_files_in_dir(self, directory: Path, pattern: str) -> bool:
        return _any_file(directory, pattern)

    def has_command(self, name: str) -> bool:
        if name not in self._commands:
            self._commands[name] = shutil.which(name, path=self._env.get("PATH")) is not None
        return self._commands[name]

    def run_command(self, name: str, args: Sequence[str]) -> str:
        """Run ``name`` with ``args`` in the working directory.

        Tools print their version banner on either stream, so stdout is used
        when non-empty and stderr otherwise.
        """

        LOGGER.debug("running %s %s", name, " ".join(args))
        completed = run_command(
            [name, *args],
            cwd=self._cwd,
            env=self._env,
            timeout=self._timeout,
        )
        return completed.stdout.strip() or completed.stderr.strip()

    def file_content(self, path: Path) -> str:
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            return ""

    def getenv(self, key: str) -> str:
        return self._env.get(key, "")

    def pwd(self) -> str:
        return str(self._cwd)

    def home(self) -> str:
        return str(self._home)

    def cache(self) -> KeyValueCache:
        return self._cache


__all__ = ["ShellEnvironment"]
