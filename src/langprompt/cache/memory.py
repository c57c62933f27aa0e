# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""In-memory key/value cache with per-entry time-to-live."""

from __future__ import annotations

import time
from collections.abc import Callable
from threading import Lock

class MemoryCache:
    """Lock-protected TTL cache satisfying :class:`~langprompt.interfaces.KeyValueCache`.

    Entries written with a non-positive TTL never expire. Expired entries are
    evicted lazily on lookup.
    """

    def __init__(self, *, clock: Callable[[], float] = time.monotonic) -> None:
        """Initialise an empty cache.

        Args:
            clock: Monotonic clock used to compute expiry; injectable for tests.
        """

        self._clock = clock
        self._store: dict[str, tuple[float | None, str]] = {}
        self._lock = Lock()

    def get(self, key: str) -> tuple[str, bool]:
        """Return the cached value for ``key`` and whether it was present.

        Args:
            key: Cache key to look up.

        Returns:
            tuple[str, bool]: Stored value and ``True`` when live, otherwise ``("", False)``.
        """

        now = self._clock()
        with self._lock:
            entry = self._store.get(key)
            if entry is None:
                return "", False
            expires_at, value = entry
            if expires_at is not None and expires_at < now:
                del self._store[key]
                return "", False
            return value, True

    def set(self, key: str, value: str, ttl: int) -> None:
        """Store ``value`` under ``key`` for ``ttl`` seconds.

        Args:
            key: Cache key to write.
            value: Value to store.
            ttl: Lifetime in seconds; non-positive values never expire.
        """

        expires_at = self._clock() + ttl if ttl > 0 else None
        with self._lock:
            self._store[key] = (expires_at, value)


__all__ = ["MemoryCache"]
