from __future__ import annotations

import pytest

from redis_locker.core.settings import LockerSettings


def test_defaults():
    settings = LockerSettings()
    assert settings.redis_url == "redis://localhost:6379/0"
    assert settings.key_prefix == "locker:"
    assert settings.defaults.try_limit == 10


def test_from_file(tmp_path):
    path = tmp_path / "locker.yml"
    path.write_text(
        "redis_url: redis://cache:6379/2\n"
        "key_prefix: 'jobs:'\n"
        "defaults:\n"
        "  ttl: 30000\n"
        "  try_delay: 50\n"
    )

    settings = LockerSettings.from_file(path)

    assert settings.redis_url == "redis://cache:6379/2"
    assert settings.key_prefix == "jobs:"
    assert settings.defaults.ttl == 30000
    assert settings.defaults.try_delay == 50
    assert settings.defaults.try_limit == 10


def test_empty_file_uses_defaults(tmp_path):
    path = tmp_path / "locker.yml"
    path.write_text("")

    assert LockerSettings.from_file(path).key_prefix == "locker:"


def test_from_file_rejects_invalid_options(tmp_path):
    path = tmp_path / "locker.yml"
    path.write_text("defaults:\n  try_limit: 0\n")

    with pytest.raises(ValueError, match="Invalid locker settings"):
        LockerSettings.from_file(path)


def test_from_env(monkeypatch):
    monkeypatch.setenv("REDIS_URL", "redis://env:6379/1")
    monkeypatch.setenv("REDIS_LOCKER_PREFIX", "env:")
    monkeypatch.setenv("REDIS_LOCKER_TTL", "1500")
    monkeypatch.setenv("REDIS_LOCKER_TRY_LIMIT", " 4 ")
    monkeypatch.delenv("REDIS_LOCKER_TRY_DELAY", raising=False)

    settings = LockerSettings.from_env()

    assert settings.redis_url == "redis://env:6379/1"
    assert settings.key_prefix == "env:"
    assert settings.defaults.ttl == 1500
    assert settings.defaults.try_limit == 4
    assert settings.defaults.try_delay == 25
    assert settings.defaults.model_dump(exclude_unset=True) == {"ttl": 1500, "try_limit": 4}


def test_from_env_rejects_non_integer(monkeypatch):
    monkeypatch.setenv("REDIS_LOCKER_TRY_DELAY", "fast")

    with pytest.raises(ValueError):
        LockerSettings.from_env()
