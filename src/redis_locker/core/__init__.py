"""Core locking primitives: options, key patterns, stores and the lock manager."""

from .errors import InvalidConfiguration, InvalidPattern, LockAcquisitionTimeout, LockerError
from .locks import LockManager
from .options import LockOptions, merge_options, normalize_options
from .patterns import build_pattern_keys
from .store import InMemoryLockStore, LockStore

__all__ = [
    "InMemoryLockStore",
    "InvalidConfiguration",
    "InvalidPattern",
    "LockAcquisitionTimeout",
    "LockManager",
    "LockOptions",
    "LockStore",
    "LockerError",
    "build_pattern_keys",
    "merge_options",
    "normalize_options",
]
