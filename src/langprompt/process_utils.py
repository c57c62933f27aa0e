# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Safe wrappers around ``subprocess`` execution."""

from __future__ import annotations

import shutil

# Bandit: subprocess usage is intentional; we provide a controlled wrapper around
# version probes, normalising arguments and disabling ``shell=True``.
import subprocess  # nosec B404
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from .errors import CommandError

if TYPE_CHECKING:
    from subprocess import CompletedProcess as _CompletedProcess  # nosec B404

TIMEOUT_EXIT_CODE = 124
NOT_FOUND_EXIT_CODE = 127
NOT_EXECUTABLE_EXIT_CODE = 126


def _normalize_args(args: Sequence[str], search_path: str | None = None) -> list[str]:
    if not args:
        msg = "subprocess command requires at least one argument"
        raise ValueError(msg)

    head, *rest = args
    head_path = Path(head)
    if head_path.is_absolute():
        return [str(head_path), *rest]

    resolved = shutil.which(head, path=search_path)
    if resolved is None:
        raise CommandError(list(args), NOT_FOUND_EXIT_CODE, stderr=f"Executable '{head}' was not found on PATH")
    return [resolved, *rest]


def _ensure_text(value: str | bytes | None) -> str | None:
    if value is None or isinstance(value, str):
        return value
    return value.decode(errors="ignore")


def run_command(
    args: Sequence[str],
    *,
    cwd: Path | None = None,
    env: Mapping[str, str] | None = None,
    check: bool = True,
    timeout: float | None = None,
) -> _CompletedProcess[str]:
    """Execute *args* after normalising the executable path.

    Output is always captured as text and stdin is detached so interactive
    tools cannot stall a prompt draw. When ``env`` is given the executable is
    looked up on its ``PATH``.

    Raises:
        CommandError: When the executable is missing, cannot be started, times
            out, or exits non-zero while ``check`` is true.
    """
    normalized = _normalize_args(args, env.get("PATH") if env is not None else None)

    try:
        # Bandit: commands originate from vetted segment definitions; we pass
        # argument lists directly without shell expansion.
        completed: _CompletedProcess[str] = subprocess.run(  # nosec B603
            normalized,
            cwd=str(cwd) if cwd is not None else None,
            env=dict(env) if env is not None else None,
            check=False,
            capture_output=True,
            text=True,
            timeout=timeout,
            stdin=subprocess.DEVNULL,
        )
    except subprocess.TimeoutExpired as exc:
        stderr = _ensure_text(exc.stderr)
        timeout_msg = f"Command timed out after {timeout:.1f}s" if timeout is not None else "Command timed out"
        raise CommandError(
            normalized,
            TIMEOUT_EXIT_CODE,
            stdout=_ensure_text(exc.stdout) or "",
            stderr=f"{stderr}\n{timeout_msg}" if stderr else timeout_msg,
        ) from exc
    except FileNotFoundError as exc:
        raise CommandError(normalized, NOT_FOUND_EXIT_CODE, stderr=str(exc)) from exc
    except OSError as exc:
        raise CommandError(normalized, NOT_EXECUTABLE_EXIT_CODE, stderr=str(exc)) from exc

    if check and completed.returncode != 0:
        raise CommandError(
            normalized,
            completed.returncode,
            stdout=completed.stdout if isinstance(completed.stdout, str) else None,
            stderr=completed.stderr if isinstance(completed.stderr, str) else None,
        )

    return completed


__all__ = ["run_command", "NOT_FOUND_EXIT_CODE", "TIMEOUT_EXIT_CODE"]
