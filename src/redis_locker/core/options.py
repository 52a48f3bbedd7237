"""Lock option model and merge helpers."""

from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, ValidationError

from .errors import InvalidConfiguration


ErrorHook = Callable[[], Any]
OptionsLike = Union["LockOptions", Mapping[str, Any]]

_ALIASES = {"onError": "on_error"}


class LockOptions(BaseModel):
    """Acquisition settings applied to a single ``lock`` call.

    ``ttl`` is the key expiry in milliseconds (``None`` keeps the key until it
    is released), ``try_delay`` the pause between attempts in milliseconds and
    ``try_limit`` the total number of attempts. ``on_error`` is called without
    arguments once retries are exhausted, right before the timeout is raised.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    ttl: Optional[StrictInt] = Field(default=None, gt=0)
    try_delay: StrictInt = Field(default=25, gt=0)
    try_limit: StrictInt = Field(default=10, gt=0)
    on_error: Optional[ErrorHook] = Field(default=None, alias="onError")


def _to_dict(options: OptionsLike) -> Dict[str, Any]:
    if isinstance(options, LockOptions):
        return options.model_dump(exclude_unset=True)
    if isinstance(options, Mapping):
        return {_ALIASES.get(name, name): value for name, value in options.items()}
    raise InvalidConfiguration(
        f"Options must be a mapping or LockOptions, got {type(options).__name__}"
    )


def normalize_options(options: Optional[OptionsLike] = None) -> LockOptions:
    """Validate ``options`` and fill in defaults."""
    if isinstance(options, LockOptions):
        return options
    try:
        return LockOptions.model_validate(_to_dict(options or {}))
    except ValidationError as exc:
        raise InvalidConfiguration(f"Invalid lock options: {exc}") from exc


def merge_options(base: LockOptions, override: Optional[OptionsLike] = None) -> LockOptions:
    """Return a new validated ``LockOptions`` with ``override`` applied over ``base``.

    Fields missing from ``override`` keep the value from ``base``; ``base`` itself
    is never modified.
    """
    if override is None:
        return base
    changes = _to_dict(override)
    if not changes:
        return base
    try:
        return LockOptions.model_validate({**base.model_dump(), **changes})
    except ValidationError as exc:
        raise InvalidConfiguration(f"Invalid lock options: {exc}") from exc
