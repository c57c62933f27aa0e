# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Interfaces for the host environment consumed by language segments."""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class KeyValueCache(Protocol):
    """String key/value store shared between segments."""

    @abstractmethod
    def get(self, key: str) -> tuple[str, bool]:
        """Return the cached value for ``key``.

        Args:
            key: Cache key to look up.

        Returns:
            tuple[str, bool]: Cached value and ``True`` when present, otherwise
            ``("", False)``.
        """
        raise NotImplementedError

    @abstractmethod
    def set(self, key: str, value: str, ttl: int) -> None:
        """Store ``value`` under ``key`` for ``ttl`` seconds.

        Args:
            key: Cache key to write.
            value: Value to store.
            ttl: Lifetime in seconds; non-positive values never expire.
        """
        raise NotImplementedError


@runtime_checkable
class Environment(Protocol):
    """Filesystem, process and cache access for segment evaluation."""

    @abstractmethod
    def has_files(self, pattern: str) -> bool:
        """Return ``True`` when a file in the working directory matches ``pattern``."""
        raise NotImplementedError

    @abstractmethod
    def has_folder(self, name: str) -> bool:
        """Return ``True`` when the working directory contains directory ``name``."""
        raise NotImplementedError

    @abstractmethod
    def has_files_in_dir(self, directory: Path, pattern: str) -> bool:
        """Return ``True`` when ``directory`` contains a file matching ``pattern``."""
        raise NotImplementedError

    @abstractmethod
    def has_command(self, name: str) -> bool:
        """Return ``True`` when executable ``name`` can be found on the system."""
        raise NotImplementedError

    @abstractmethod
    def run_command(self, name: str, args: Sequence[str]) -> str:
        """Run ``name`` with ``args`` and return its output.

        Args:
            name: Executable to invoke.
            args: Arguments passed to the executable.

        Returns:
            str: Trimmed command output.

        Raises:
            CommandError: When the command cannot be started or exits non-zero.
        """
        raise NotImplementedError

    @abstractmethod
    def file_content(self, path: Path) -> str:
        """Return the text of ``path`` or an empty string when unreadable."""
        raise NotImplementedError

    @abstractmethod
    def getenv(self, key: str) -> str:
        """Return environment variable ``key`` or an empty string."""
        raise NotImplementedError

    @abstractmethod
    def pwd(self) -> str:
        """Return the current working directory."""
        raise NotImplementedError

    @abstractmethod
    def home(self) -> str:
        """Return the user's home directory."""
        raise NotImplementedError

    @abstractmethod
    def cache(self) -> KeyValueCache:
        """Return the cache shared by segments evaluated in this environment."""
        raise NotImplementedError


__all__ = ["Environment", "KeyValueCache"]
