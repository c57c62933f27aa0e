# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from langprompt.errors import CommandError
from langprompt.interfaces import KeyValueCache

HOME = "/usr/home"
PROJECT = "/usr/home/project"


@dataclass
class FakeCache:
    """Cache double recording every write."""

    entries: dict[str, str] = field(default_factory=dict)
    writes: list[tuple[str, str, int]] = field(default_factory=list)
    reads: list[str] = field(default_factory=list)

    def get(self, key: str) -> tuple[str, bool]:
        self.reads.append(key)
        if key in self.entries:
            return self.entries[key], True
        return "", False

    def set(self, key: str, value: str, ttl: int) -> None:
        self.writes.append((key, value, ttl))
        self.entries[key] = value


@dataclass
class FakeEnvironment:
    """In-memory environment: commands, files and directories are declared up front."""

    files: set[str] = field(default_factory=set)
    folders: set[str] = field(default_factory=set)
    commands: set[str] = field(default_factory=set)
    output: str = ""
    error: CommandError | None = None
    file_contents: dict[str, str] = field(default_factory=dict)
    variables: dict[str, str] = field(default_factory=dict)
    cwd: str = PROJECT
    home_dir: str = HOME
    kv_cache: KeyValueCache = field(default_factory=FakeCache)
    calls: list[tuple[str, tuple[str, ...]]] = field(default_factory=list)

    def has_files(self, pattern: str) -> bool:
        return pattern in self.files

    def has_folder(self, name: str) -> bool:
        return name in self.folders

    def has_files_in_dir(self, directory: Path, pattern: str) -> bool:
        return str(directory / pattern) in self.file_contents

    def has_command(self, name: str) -> bool:
        return name in self.commands

    def run_command(self, name: str, args: Sequence[str]) -> str:
        self.calls.append((name, tuple(args)))
        if self.error is not None:
            raise self.error
        return self.output

    def file_content(self, path: Path) -> str:
        return self.file_contents.get(str(path), "")

    def getenv(self, key: str) -> str:
        return self.variables.get(key, "")

    def pwd(self) -> str:
        return self.cwd

    def home(self) -> str:
        return self.home_dir

    def cache(self) -> KeyValueCache:
        return self.kv_cache


MakeEnv = Callable[..., FakeEnvironment]


@pytest.fixture
def make_env() -> MakeEnv:
    """Return a factory building :class:`FakeEnvironment` instances."""

    def _factory(
        *,
        files: Iterable[str] = (),
        folders: Iterable[str] = (),
        commands: Iterable[str] = (),
        output: str = "",
        error: CommandError | None = None,
        file_contents: Mapping[str, str] | None = None,
        variables: Mapping[str, str] | None = None,
        in_home: bool = False,
        cache: KeyValueCache | None = None,
    ) -> FakeEnvironment:
        return FakeEnvironment(
            files=set(files),
            folders=set(folders),
            commands=set(commands),
            output=output,
            error=error,
            file_contents=dict(file_contents or {}),
            variables=dict(variables or {}),
            cwd=HOME if in_home else PROJECT,
            kv_cache=cache if cache is not None else FakeCache(),
        )

    return _factory
