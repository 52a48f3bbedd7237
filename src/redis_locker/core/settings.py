"""Locker settings loader."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import yaml
from pydantic import BaseModel, Field, ValidationError

from redis_locker.core.locks import DEFAULT_KEY_PREFIX
from redis_locker.core.options import LockOptions
from redis_locker.utils.env import get_int_env, get_str_env


class LockerSettings(BaseModel):
    redis_url: str = "redis://localhost:6379/0"
    key_prefix: str = DEFAULT_KEY_PREFIX
    defaults: LockOptions = Field(default_factory=LockOptions)

    @classmethod
    def from_file(cls, path: Path) -> "LockerSettings":
        data = yaml.safe_load(path.read_text()) or {}
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise ValueError(f"Invalid locker settings: {exc}") from exc

    @classmethod
    def from_env(cls) -> "LockerSettings":
        """Build settings from ``REDIS_URL`` and ``REDIS_LOCKER_*`` variables."""
        data: Dict[str, Any] = {}
        url = get_str_env("REDIS_URL")
        if url:
            data["redis_url"] = url
        prefix = get_str_env("REDIS_LOCKER_PREFIX")
        if prefix:
            data["key_prefix"] = prefix

        defaults = {}
        for field in ("ttl", "try_delay", "try_limit"):
            value = get_int_env(f"REDIS_LOCKER_{field.upper()}")
            if value is not None:
                defaults[field] = value
        data["defaults"] = defaults
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise ValueError(f"Invalid locker settings: {exc}") from exc
