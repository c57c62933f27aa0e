# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point for inspecting language segments."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Final

import typer
from rich.console import Console
from rich.markup import escape

from ..cache import FileCache, MemoryCache
from ..config_loader import default_config_path, load_config, properties_for
from ..environment import ShellEnvironment
from ..errors import ConfigError, UnknownLanguageError
from ..interfaces import KeyValueCache
from ..logging_utils import configure_verbose_logging
from ..segments import BUILTIN_LANGUAGES, build_segment
from .rendering import build_languages_table, build_state_table

EXIT_DISABLED: Final[int] = 1
EXIT_USAGE: Final[int] = 2

app = typer.Typer(help="Resolve language runtime versions for prompt segments.", no_args_is_help=True)


@app.command("show")
def show_command(
    language: Annotated[str, typer.Argument(help="Built-in language name, e.g. python.")],
    cwd: Annotated[
        Path | None,
        typer.Option("--cwd", help="Directory to evaluate instead of the current one.", file_okay=False),
    ] = None,
    config: Annotated[
        Path | None,
        typer.Option("--config", help="TOML configuration file with [segments.<language>] tables."),
    ] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Emit the segment state as JSON.")] = False,
    no_cache: Annotated[bool, typer.Option("--no-cache", help="Keep version probes in memory only.")] = False,
    timeout: Annotated[
        float | None,
        typer.Option("--timeout", min=0.1, help="Seconds to wait for each version command."),
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log pipeline decisions to stderr.")] = False,
) -> None:
    """Evaluate one language segment in a directory.

    Exits with status 1 when the segment would not render.
    """

    if verbose:
        configure_verbose_logging()
    console = Console()
    try:
        properties = properties_for(load_config(config or default_config_path()), language)
    except ConfigError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=EXIT_USAGE) from exc

    cache: KeyValueCache = MemoryCache() if no_cache else FileCache()
    env = ShellEnvironment(cwd=cwd, cache=cache, timeout=timeout)
    try:
        segment = build_segment(language, env, properties)
    except UnknownLanguageError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=EXIT_USAGE) from exc

    enabled = segment.enabled()
    if as_json:
        typer.echo(json.dumps({"language": language, "enabled": enabled, **segment.state.to_dict()}, indent=2))
    else:
        console.print(build_state_table(segment, enabled=enabled))
    if not enabled:
        raise typer.Exit(code=EXIT_DISABLED)


@app.command("languages")
def languages_command() -> None:
    """List the built-in language segments."""

    Console().print(build_languages_table(BUILTIN_LANGUAGES.values()))


def main() -> None:
    """Console-script entry point."""

    app()


__all__ = ["app", "main"]
