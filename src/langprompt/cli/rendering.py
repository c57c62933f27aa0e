# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rich renderables for segment inspection output."""

from __future__ import annotations

from collections.abc import Iterable

from rich import box
from rich.markup import escape
from rich.table import Table

from ..language import LanguageSegment
from ..segments import LanguageDefinition


def build_state_table(segment: LanguageSegment, *, enabled: bool) -> Table:
    """Return a two-column table describing ``segment`` after evaluation."""

    state = segment.state
    table = Table(title=f"{segment.name} segment", box=box.SIMPLE, show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value", overflow="fold")
    table.add_row("Enabled", "[green]yes[/green]" if enabled else "[yellow]no[/yellow]")
    if not enabled:
        return table
    table.add_row("Version", escape(state.full) or "-")
    table.add_row("Executable", escape(state.executable) or "-")
    if state.expected:
        expected_style = "red" if state.mismatch else "green"
        table.add_row("Expected", f"[{expected_style}]{escape(state.expected)}[/{expected_style}]")
    if state.error:
        table.add_row("Error", f"[red]{escape(state.error)}[/red]")
    if state.exit_code:
        table.add_row("Exit code", str(state.exit_code))
    if state.url:
        table.add_row("URL", escape(state.url))
    return table


def build_languages_table(definitions: Iterable[LanguageDefinition]) -> Table:
    """Return a table summarising the built-in language catalogue."""

    table = Table(title="Languages", box=box.SIMPLE)
    table.add_column("Name", style="bold cyan")
    table.add_column("Commands")
    table.add_column("Extensions", overflow="fold")
    table.add_column("Pin")
    for definition in definitions:
        table.add_row(
            definition.name,
            ", ".join(command.executable for command in definition.commands),
            " ".join(definition.extensions),
            definition.pin.filename if definition.pin else "-",
        )
    return table


__all__ = ["build_languages_table", "build_state_table"]
