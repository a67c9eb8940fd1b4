"""Owner validation results and the cache that holds them.

Validation itself (asking a directory service whether ``@org/team`` or
``@user`` exists) lives outside this package; it is consumed through the
``OwnerValidator`` protocol. Results are memoized in an ``OwnerCache`` that
is passed explicitly to whoever needs it.

Concurrent lookups may validate the same owner twice. Validation is
idempotent, so the cache keeps whichever result was inserted last.
"""

from __future__ import annotations

import threading
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol

from ownerscope.core.logging import get_logger

log = get_logger("owners.cache")


class OwnerValidator(Protocol):
    """Answers whether an owner exists: True, False, or None when unknown."""

    def __call__(self, owner: str) -> bool | None: ...


@dataclass(frozen=True, slots=True)
class OwnerStatus:
    """Cached validation outcome for one owner token."""

    owner: str
    valid: bool
    checked_at: float = field(default_factory=time.time)


class OwnerCache:
    """Thread-safe owner -> status map with last-write-wins inserts."""

    def __init__(
        self,
        entries: dict[str, OwnerStatus] | None = None,
        *,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._entries: dict[str, OwnerStatus] = dict(entries or {})
        self._lock = threading.Lock()
        self._clock = clock

    def lookup(self, owner: str, *, max_age_sec: float | None = None) -> OwnerStatus | None:
        """Cached status for ``owner``; entries older than ``max_age_sec`` are misses."""
        with self._lock:
            status = self._entries.get(owner)
        if status is None:
            return None
        if max_age_sec is not None and self._clock() - status.checked_at > max_age_sec:
            return None
        return status

    def insert(self, owner: str, valid: bool) -> OwnerStatus:
        status = OwnerStatus(owner=owner, valid=valid, checked_at=self._clock())
        with self._lock:
            self._entries[owner] = status
        return status

    def snapshot(self) -> dict[str, OwnerStatus]:
        """Point-in-time copy of all entries."""
        with self._lock:
            return dict(self._entries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


class CachedValidator:
    """Wraps a validator so each owner is asked about at most once per freshness window."""

    def __init__(
        self,
        validator: OwnerValidator,
        cache: OwnerCache,
        *,
        max_age_sec: float | None = None,
    ) -> None:
        self._validator = validator
        self._cache = cache
        self._max_age_sec = max_age_sec

    @property
    def cache(self) -> OwnerCache:
        return self._cache

    def __call__(self, owner: str) -> bool | None:
        cached = self._cache.lookup(owner, max_age_sec=self._max_age_sec)
        if cached is not None:
            return cached.valid

        result = self._validator(owner)
        if result is None:
            # Unknown answers (e.g. service unreachable) are not cached
            log.debug("owner_validation_unknown", owner=owner)
            return None
        self._cache.insert(owner, result)
        return result
