# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Version lookup for packages installed under ``node_modules``."""

from __future__ import annotations

import json
from pathlib import Path

from ..errors import PackageVersionError
from ..interfaces import Environment

_MANIFEST = "package.json"


def node_package_version(env: Environment, package: str) -> str:
    """Return the ``version`` declared by ``node_modules/<package>/package.json``.

    Args:
        env: Environment providing file access.
        package: Package name, optionally scoped (``@angular/core``).

    Returns:
        str: Declared package version.

    Raises:
        PackageVersionError: If the manifest is missing, malformed, or has no version.
    """

    folder = Path(env.pwd()) / "node_modules" / package
    if not env.has_files_in_dir(folder, _MANIFEST):
        raise PackageVersionError(f"{package} is not installed")
    content = env.file_content(folder / _MANIFEST)
    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise PackageVersionError(f"invalid {_MANIFEST} for {package}") from exc
    version = data.get("version") if isinstance(data, dict) else None
    if not isinstance(version, str) or not version:
        raise PackageVersionError(f"{package} declares no version")
    return version


__all__ = ["node_package_version"]
