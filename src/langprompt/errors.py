# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy shared across the segment resolution pipeline."""

from __future__ import annotations

from collections.abc import Sequence


class LangPromptError(Exception):
    """Base class for errors raised by ``langprompt``."""


class ConfigError(LangPromptError):
    """Raised when segment properties or configuration files are invalid."""


class CommandError(LangPromptError):
    """Raised when an external command fails to start or exits non-zero."""

    def __init__(
        self,
        command: Sequence[str],
        exit_code: int,
        stdout: str | None = None,
        stderr: str | None = None,
    ) -> None:
        name = command[0] if command else "<unknown>"
        super().__init__(f"Command '{name}' exited with status {exit_code}. stderr: {stderr or '<none>'}")
        self.command = tuple(command)
        self.exit_code = exit_code
        self.stdout = stdout
        self.stderr = stderr


class VersionExtractionError(LangPromptError):
    """Base class for failures while producing a version for a candidate."""


class CommandFailedError(VersionExtractionError):
    """Raised when running a candidate command did not produce output."""

    def __init__(self, executable: str, args: Sequence[str], exit_code: int = 0) -> None:
        super().__init__(f"err executing {executable} with [{' '.join(args)}]")
        self.executable = executable
        self.command_args = tuple(args)
        self.exit_code = exit_code


class VersionParseError(VersionExtractionError):
    """Raised when command output does not match the candidate pattern."""

    def __init__(self, executable: str, output: str) -> None:
        super().__init__(f"err parsing info from {executable} with {output}")
        self.executable = executable
        self.output = output


class PackageVersionError(LangPromptError):
    """Raised when an installed package manifest cannot provide a version."""


class UnknownLanguageError(LangPromptError):
    """Raised when a language name is not part of the built-in catalogue."""


__all__ = [
    "CommandError",
    "CommandFailedError",
    "ConfigError",
    "LangPromptError",
    "PackageVersionError",
    "UnknownLanguageError",
    "VersionExtractionError",
    "VersionParseError",
]
