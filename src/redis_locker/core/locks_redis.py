"""Redis-based lock store using SET NX PX semantics."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, List, Optional, Sequence

from redis.asyncio import Redis

from .locks import DEFAULT_KEY_PREFIX, LockManager
from .options import OptionsLike

if TYPE_CHECKING:
    from .settings import LockerSettings


class RedisLockStore:
    """Runs each batch as one MULTI/EXEC round trip."""

    def __init__(self, redis: Redis) -> None:
        self._redis = redis

    async def set_if_absent(self, keys: Sequence[str], ttl: Optional[int]) -> List[bool]:
        async with self._redis.pipeline(transaction=True) as pipe:
            for key in keys:
                pipe.set(key, "", nx=True, px=ttl)
            # per-command errors come back as exception instances and count as
            # contention; connection errors still raise
            results = await pipe.execute(raise_on_error=False)
        return [result is True for result in results]

    async def delete(self, keys: Sequence[str]) -> int:
        if not keys:
            return 0
        return await self._redis.delete(*keys)


class RedisLockManager(LockManager):
    def __init__(
        self,
        url: Optional[str] = None,
        options: Optional[OptionsLike] = None,
        *,
        key_prefix: str = DEFAULT_KEY_PREFIX,
        redis: Optional[Redis] = None,
    ) -> None:
        if redis is None:
            redis = Redis.from_url(url or os.getenv("REDIS_URL", "redis://localhost:6379/0"))
        self.redis = redis
        super().__init__(RedisLockStore(redis), options, key_prefix=key_prefix)

    @classmethod
    def from_settings(cls, settings: "LockerSettings", *, redis: Optional[Redis] = None) -> "RedisLockManager":
        return cls(
            settings.redis_url,
            settings.defaults.model_dump(exclude_unset=True),
            key_prefix=settings.key_prefix,
            redis=redis,
        )

    async def close(self) -> None:
        """Close the underlying connection pool. Held keys are not released."""
        await self.redis.aclose()
