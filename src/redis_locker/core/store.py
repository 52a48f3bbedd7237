"""Storage boundary for lock keys."""

from __future__ import annotations

import time
from typing import Dict, List, Optional, Protocol, Sequence


class LockStore(Protocol):
    """
    Batch executor for lock keys.

    Guarantees:
    - Each key is created only if it does not already exist
    - One result per key, in submission order
    - No atomicity across keys of the same batch
    """

    async def set_if_absent(self, keys: Sequence[str], ttl: Optional[int]) -> List[bool]:
        """Create every key with an empty value unless it exists.

        ``ttl`` is an expiry in milliseconds applied atomically with creation,
        or ``None`` for keys that never expire. ``True`` means the key was
        created by this call.
        """
        ...

    async def delete(self, keys: Sequence[str]) -> int:
        """Delete keys by name in one operation and return how many existed."""
        ...


class InMemoryLockStore:
    """
    In-memory reference implementation.

    Used for:
    - Tests
    - Local experiments in a single process

    NOT for production.
    """

    def __init__(self) -> None:
        self._data: Dict[str, Optional[float]] = {}

    def _alive(self, key: str, now: float) -> bool:
        if key not in self._data:
            return False
        expires_at = self._data[key]
        if expires_at is not None and expires_at <= now:
            del self._data[key]
            return False
        return True

    async def set_if_absent(self, keys: Sequence[str], ttl: Optional[int]) -> List[bool]:
        now = time.monotonic()
        results = []
        for key in keys:
            if self._alive(key, now):
                results.append(False)
                continue
            self._data[key] = None if ttl is None else now + ttl / 1000
            results.append(True)
        return results

    async def delete(self, keys: Sequence[str]) -> int:
        now = time.monotonic()
        removed = 0
        for key in keys:
            if self._alive(key, now):
                del self._data[key]
                removed += 1
        return removed

    def exists(self, key: str) -> bool:
        return self._alive(key, time.monotonic())
