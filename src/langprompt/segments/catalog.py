# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Built-in language segment definitions."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace
from functools import partial
from operator import attrgetter
from types import MappingProxyType
from typing import Final

from ..errors import UnknownLanguageError
from ..interfaces import Environment
from ..language import LanguageSegment, VersionCommand, VersionPin, node_package_version
from ..properties import SegmentProperties

_SEMVER: Final[str] = r"(?P<version>((?P<major>[0-9]+)\.(?P<minor>[0-9]+)\.(?P<patch>[0-9]+)))"


@dataclass(frozen=True, slots=True)
class LanguageDefinition:
    """Static description of a language segment.

    Attributes:
        name: Catalogue key.
        extensions: File globs marking the language.
        commands: Version candidates in priority order.
        folders: Marker directories marking the language.
        version_url_template: Segment-level documentation link template.
        pin: Optional version-pin file reconciled against the detected version.
        context_env: Environment variables signalling an active language context.
        node_package: Package read from ``node_modules`` instead of running a command.
    """

    name: str
    extensions: tuple[str, ...]
    commands: tuple[VersionCommand, ...] = ()
    folders: tuple[str, ...] = ()
    version_url_template: str = ""
    pin: VersionPin | None = None
    context_env: tuple[str, ...] = ()
    node_package: str | None = None


_DEFINITIONS: Final[tuple[LanguageDefinition, ...]] = (
    LanguageDefinition(
        name="python",
        extensions=("*.py", "*.ipynb", "pyproject.toml", "setup.py", "Pipfile", "requirements.txt", "tox.ini"),
        commands=(
            VersionCommand("python", ("--version",), rf"(?:Python {_SEMVER})"),
            VersionCommand("python3", ("--version",), rf"(?:Python {_SEMVER})"),
            VersionCommand("py", ("--version",), rf"(?:Python {_SEMVER})"),
        ),
        folders=(".venv", "venv"),
        version_url_template=(
            "https://docs.python.org/release/{{ .Major }}.{{ .Minor }}.{{ .Patch }}/whatsnew/changelog.html"
        ),
        pin=VersionPin(".python-version"),
        context_env=("VIRTUAL_ENV", "CONDA_DEFAULT_ENV", "PYENV_VERSION"),
    ),
    LanguageDefinition(
        name="node",
        extensions=("*.js", "*.mjs", "*.cjs", "*.ts", "package.json", ".nvmrc", "pnpm-workspace.yaml"),
        commands=(VersionCommand("node", ("--version",), rf"(?:v{_SEMVER})"),),
        version_url_template=(
            "https://github.com/nodejs/node/blob/v{{ .Full }}/doc/changelogs/CHANGELOG_V{{ .Major }}.md#{{ .Full }}"
        ),
        pin=VersionPin(".nvmrc"),
    ),
    LanguageDefinition(
        name="golang",
        extensions=("*.go", "go.mod"),
        commands=(
            VersionCommand(
                "go",
                ("version",),
                r"(?:go(?P<version>((?P<major>[0-9]+)\.(?P<minor>[0-9]+)(\.(?P<patch>[0-9]+))?)))",
            ),
        ),
        version_url_template="https://golang.org/doc/go{{ .Major }}.{{ .Minor }}",
        pin=VersionPin("go.mod", r"^go\s+(?P<version>[0-9][0-9.]*)"),
    ),
    LanguageDefinition(
        name="rust",
        extensions=("*.rs", "Cargo.toml", "Cargo.lock"),
        commands=(
            VersionCommand(
                "rustc",
                ("--version",),
                r"(?:rustc (?P<version>((?P<major>[0-9]+)\.(?P<minor>[0-9]+)\.(?P<patch>[0-9]+))"
                r"(-(?P<prerelease>[a-z]+))?))",
            ),
        ),
        version_url_template="https://blog.rust-lang.org/releases/{{ .Full }}",
    ),
    LanguageDefinition(
        name="ruby",
        extensions=("*.rb", "Rakefile", "Gemfile"),
        commands=(
            VersionCommand("rbenv", ("version-name",), _SEMVER),
            VersionCommand("ruby", ("--version",), rf"(?:ruby {_SEMVER})"),
        ),
        version_url_template="https://www.ruby-lang.org/en/news/tags/{{ .Major }}-{{ .Minor }}/",
        pin=VersionPin(".ruby-version", r"^\s*(?:ruby-)?(?P<version>[0-9][0-9.]*)"),
    ),
    LanguageDefinition(
        name="angular",
        extensions=("angular.json",),
        commands=(VersionCommand("@angular/core", (), _SEMVER),),
        version_url_template="https://github.com/angular/angular/releases/tag/{{ .Full }}",
        node_package="@angular/core",
    ),
)

BUILTIN_LANGUAGES: Final[MappingProxyType[str, LanguageDefinition]] = MappingProxyType(
    {definition.name: definition for definition in _DEFINITIONS},
)


def get_definition(name: str) -> LanguageDefinition:
    """Return the built-in definition for ``name``.

    Raises:
        UnknownLanguageError: If ``name`` is not catalogued.
    """

    try:
        return BUILTIN_LANGUAGES[name]
    except KeyError as exc:
        known = ", ".join(sorted(BUILTIN_LANGUAGES))
        raise UnknownLanguageError(f"unknown language '{name}' (known: {known})") from exc


def _any_env_set(env: Environment, keys: tuple[str, ...]) -> bool:
    return any(env.getenv(key) for key in keys)


def _bind_commands(definition: LanguageDefinition, env: Environment) -> tuple[VersionCommand, ...]:
    if definition.node_package is None:
        return definition.commands
    getter: Callable[[], str] = partial(node_package_version, env, definition.node_package)
    return tuple(replace(command, getter=getter) for command in definition.commands)


def build_segment(
    name: str,
    env: Environment,
    properties: SegmentProperties | None = None,
) -> LanguageSegment:
    """Construct a :class:`LanguageSegment` for the built-in language ``name``.

    Args:
        name: Catalogue key such as ``"python"``.
        env: Environment the segment evaluates against.
        properties: User configuration for the segment.

    Returns:
        LanguageSegment: Segment wired with the definition's pin and context hooks.
    """

    definition = get_definition(name)
    segment = LanguageSegment(
        name=definition.name,
        env=env,
        properties=properties,
        extensions=definition.extensions,
        folders=definition.folders,
        commands=_bind_commands(definition, env),
        version_url_template=definition.version_url_template,
        in_context=partial(_any_env_set, env, definition.context_env) if definition.context_env else None,
    )
    if definition.pin is not None:
        detected = partial(attrgetter("state.full"), segment)
        segment.matches_version_file = definition.pin.matcher(env, detected)
    return segment


__all__ = ["BUILTIN_LANGUAGES", "LanguageDefinition", "build_segment", "get_definition"]
