"""Multi-key lock manager with bounded retries over contended keys."""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, FrozenSet, Iterable, List, Optional, Set

from tenacity import AsyncRetrying, retry_if_exception_type, stop_after_attempt, wait_fixed

from redis_locker.core.errors import LockAcquisitionTimeout
from redis_locker.core.options import LockOptions, OptionsLike, merge_options, normalize_options
from redis_locker.core.patterns import build_pattern_keys
from redis_locker.core.store import LockStore
from redis_locker.utils.logging import get_logger


DEFAULT_KEY_PREFIX = "locker:"


class _KeysContended(Exception):
    def __init__(self, pending: List[str]) -> None:
        super().__init__(pending)
        self.pending = pending


class LockManager:
    """
    Claims keys in a shared store and keeps track of them until released.

    Every ``lock`` call sends one batch of create-if-absent operations per
    attempt and only retries the keys that are still taken. Keys won by any
    call accumulate on the manager; ``release`` drops all of them at once.

    Does NOT:
    - Roll back keys won before a timeout
    - Check ownership when releasing
    - Release keys when a pending ``lock`` call is cancelled
    """

    def __init__(
        self,
        store: LockStore,
        options: Optional[OptionsLike] = None,
        *,
        key_prefix: str = DEFAULT_KEY_PREFIX,
    ) -> None:
        self._store = store
        self.options: LockOptions = normalize_options(options)
        self.key_prefix = key_prefix
        self.logger = get_logger("LockManager")
        self._held: Set[str] = set()
        self._lock = asyncio.Lock()

    @property
    def held_keys(self) -> FrozenSet[str]:
        """Namespaced keys currently held by this manager."""
        return frozenset(self._held)

    async def lock(self, *keys: str, options: Optional[OptionsLike] = None) -> None:
        """
        Acquire every key, retrying the contended ones.

        ``options`` overrides the manager defaults for this call only.

        Raises:
            InvalidConfiguration: before contacting the store
            LockAcquisitionTimeout: once ``try_limit`` attempts left keys pending
        """
        effective = merge_options(self.options, options)
        pending = self._unique_keys(keys)
        if not pending:
            return

        retrying = AsyncRetrying(
            stop=stop_after_attempt(effective.try_limit),
            wait=wait_fixed(effective.try_delay / 1000),
            retry=retry_if_exception_type(_KeysContended),
            reraise=True,
        )
        try:
            async for attempt in retrying:
                with attempt:
                    pending = await self._attempt(
                        pending, effective.ttl, attempt.retry_state.attempt_number
                    )
                    if pending:
                        raise _KeysContended(pending)
        except _KeysContended as exc:
            self.logger.warning(
                "Giving up on %d keys after %d attempts: %s",
                len(exc.pending),
                effective.try_limit,
                ", ".join(exc.pending),
            )
            if effective.on_error is not None:
                effective.on_error()
            raise LockAcquisitionTimeout(exc.pending, effective.try_limit) from None

    async def lock_pattern(
        self, template: str, *values: object, options: Optional[OptionsLike] = None
    ) -> None:
        """Lock one key per value substituted into the ``{}`` of ``template``."""
        keys = build_pattern_keys(template, values)
        await self.lock(*keys, options=options)

    async def release(self) -> None:
        """Delete every held key in one call. No-op when nothing is held."""
        async with self._lock:
            if not self._held:
                return
            keys = sorted(self._held)
            await self._store.delete(keys)
            self._held.clear()
        self.logger.info("Released %d keys", len(keys))

    @asynccontextmanager
    async def locked(
        self, *keys: str, options: Optional[OptionsLike] = None
    ) -> AsyncIterator["LockManager"]:
        """Hold ``keys`` for the duration of the block.

        On exit everything the manager holds is released, including keys from
        earlier calls and keys won before a timeout.
        """
        try:
            await self.lock(*keys, options=options)
            yield self
        finally:
            await self.release()

    async def _attempt(self, pending: List[str], ttl: Optional[int], number: int) -> List[str]:
        names = [self.key_prefix + key for key in pending]
        results = await self._store.set_if_absent(names, ttl)
        if len(results) != len(names):
            raise RuntimeError(f"Store returned {len(results)} results for {len(names)} keys")

        won = [name for name, created in zip(names, results) if created]
        remaining = [key for key, created in zip(pending, results) if not created]
        if won:
            async with self._lock:
                self._held.update(won)
        self.logger.debug(
            "Attempt %d: locked %d of %d keys", number, len(won), len(pending)
        )
        return remaining

    @staticmethod
    def _unique_keys(keys: Iterable[str]) -> List[str]:
        unique = []
        for key in keys:
            if not isinstance(key, str):
                raise TypeError(f"Lock keys must be strings, got {type(key).__name__}")
            unique.append(key)
        return list(dict.fromkeys(unique))
