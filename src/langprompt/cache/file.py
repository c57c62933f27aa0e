# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""JSON-backed cache persisting version probes between prompt draws."""

from __future__ import annotations

import json
import logging
import os
import tempfile
import time
from collections.abc import Callable
from pathlib import Path
from threading import Lock

LOGGER = logging.getLogger(__name__)

_CACHE_FILE = "cache.json"
_CACHE_DIR_NAME = "langprompt"


def default_cache_dir() -> Path:
    """Return ``$XDG_CACHE_HOME/langprompt`` or ``~/.cache/langprompt``."""

    xdg = os.environ.get("XDG_CACHE_HOME")
    base = Path(xdg) if xdg else Path.home() / ".cache"
    return base / _CACHE_DIR_NAME


def _load_entries(path: Path) -> dict[str, tuple[float | None, str]]:
    if not path.is_file():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError):
        LOGGER.debug("ignoring unreadable cache file %s", path)
        return {}
    if not isinstance(data, dict):
        return {}
    entries: dict[str, tuple[float | None, str]] = {}
    for key, payload in data.items():
        if not isinstance(key, str) or not isinstance(payload, dict):
            continue
        value = payload.get("value")
        expires = payload.get("expires")
        if not isinstance(value, str):
            continue
        if expires is not None and not isinstance(expires, (int, float)):
            continue
        entries[key] = (float(expires) if expires is not None else None, value)
    return entries


class FileCache:
    """Cache stored as a single JSON document inside ``cache_dir``.

    Expiry timestamps are absolute wall-clock seconds so entries survive across
    shell sessions. The file is read lazily on first access. Every :meth:`set`
    re-reads it, merges the new entry and atomically replaces it.
    """

    def __init__(self, cache_dir: Path | None = None, *, clock: Callable[[], float] = time.time) -> None:
        self._dir = cache_dir or default_cache_dir()
        self._clock = clock
        self._entries: dict[str, tuple[float | None, str]] | None = None
        self._lock = Lock()

    @property
    def path(self) -> Path:
        """Return the location of the JSON cache document."""

        return self._dir / _CACHE_FILE

    def _ensure_loaded(self) -> dict[str, tuple[float | None, str]]:
        if self._entries is None:
            self._entries = _load_entries(self.path)
        return self._entries

    def get(self, key: str) -> tuple[str, bool]:
        """Return the cached value for ``key`` and whether it was present."""

        with self._lock:
            entries = self._ensure_loaded()
            entry = entries.get(key)
            if entry is None:
                return "", False
            expires_at, value = entry
            if expires_at is not None and expires_at < self._clock():
                del entries[key]
                return "", False
            return value, True

    def set(self, key: str, value: str, ttl: int) -> None:
        """Store ``value`` under ``key`` for ``ttl`` seconds and persist the file.

        Entries written by other processes since this instance loaded are
        merged back in before the document is replaced. Failures to persist
        are logged and leave the in-memory entry in place.
        """

        with self._lock:
            now = self._clock()
            entries = {**self._ensure_loaded(), **_load_entries(self.path)}
            entries[key] = (now + ttl if ttl > 0 else None, value)
            self._entries = {
                name: entry for name, entry in entries.items() if entry[0] is None or entry[0] >= now
            }
            try:
                self._write(self._entries)
            except OSError as exc:
                LOGGER.debug("unable to persist cache file %s: %s", self.path, exc)

    def _write(self, entries: dict[str, tuple[float | None, str]]) -> None:
        payload = {name: {"value": stored, "expires": expires} for name, (expires, stored) in entries.items()}
        self._dir.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w", encoding="utf-8", dir=self._dir, prefix=".cache-", suffix=".json", delete=False
        ) as handle:
            tmp_path = Path(handle.name)
            handle.write(json.dumps(payload, indent=2, sort_keys=True))
        try:
            os.replace(tmp_path, self.path)
        except OSError:
            tmp_path.unlink(missing_ok=True)
            raise


__all__ = ["FileCache", "default_cache_dir"]
