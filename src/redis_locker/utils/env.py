"""Environment helper utilities."""

from __future__ import annotations

import os
from typing import Optional


_FALSE_VALUES = {"0", "false", "no", "off"}


def get_str_env(name: str, *, default: Optional[str] = None) -> Optional[str]:
    """Return the stripped value of an environment variable, or ``default`` when unset/blank."""
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip()
    return value or default


def get_bool_env(name: str, *, default: bool = False) -> bool:
    value = get_str_env(name)
    if value is None:
        return default
    return value.lower() not in _FALSE_VALUES


def get_int_env(name: str, *, default: Optional[int] = None) -> Optional[int]:
    """Read an integer from the environment."""
    value = get_str_env(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise ValueError(f"Environment variable {name} must be an integer, got {value!r}") from exc
