"""Exception types raised by the locker."""

from __future__ import annotations

from typing import Sequence


class LockerError(Exception):
    """Base class for all locker errors."""


class InvalidConfiguration(LockerError, ValueError):
    """An option value failed validation. Raised before any store call."""


class InvalidPattern(LockerError, ValueError):
    """A key template does not contain exactly one placeholder."""


class LockAcquisitionTimeout(LockerError):
    """Retries were exhausted while some keys were still held by another owner.

    Keys won during earlier attempts of the same call stay held by the
    manager and must be released explicitly.
    """

    code = "LOCKED"

    def __init__(self, keys: Sequence[str], attempts: int) -> None:
        self.keys = tuple(keys)
        self.key = self.keys[0]
        self.attempts = attempts
        super().__init__(f'Cannot lock key "{self.key}".')
