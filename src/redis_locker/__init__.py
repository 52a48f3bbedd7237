"""Redis-backed multi-key distributed locks."""

from .core.errors import (
    InvalidConfiguration,
    InvalidPattern,
    LockAcquisitionTimeout,
    LockerError,
)
from .core.locks import DEFAULT_KEY_PREFIX, LockManager
from .core.locks_redis import RedisLockManager, RedisLockStore
from .core.options import LockOptions, merge_options, normalize_options
from .core.patterns import build_pattern_keys
from .core.store import InMemoryLockStore, LockStore

__all__ = [
    "__version__",
    "DEFAULT_KEY_PREFIX",
    "InMemoryLockStore",
    "InvalidConfiguration",
    "InvalidPattern",
    "LockAcquisitionTimeout",
    "LockManager",
    "LockOptions",
    "LockStore",
    "LockerError",
    "RedisLockManager",
    "RedisLockStore",
    "build_pattern_keys",
    "merge_options",
    "normalize_options",
]

__version__ = "0.1.0"
