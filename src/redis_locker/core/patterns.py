"""Expansion of templated key patterns into concrete lock keys."""

from __future__ import annotations

from typing import Any, Iterable, List

from .errors import InvalidPattern

PLACEHOLDER = "{}"


def build_pattern_keys(template: str, values: Iterable[Any]) -> List[str]:
    """
    Substitute every value into the single ``{}`` placeholder of ``template``.

    Values are converted with ``str()``. Duplicate keys collapse to one while
    the order of first appearance is kept, e.g.::

        >>> build_pattern_keys("item:{}:lock", ["a", "b", "a"])
        ['item:a:lock', 'item:b:lock']
    """
    if not isinstance(template, str):
        raise InvalidPattern(f"Pattern must be a string, got {type(template).__name__}")
    parts = template.split(PLACEHOLDER)
    if len(parts) != 2:
        raise InvalidPattern(
            f"Pattern {template!r} must contain exactly one {PLACEHOLDER!r} placeholder"
        )
    prefix, suffix = parts
    keys = dict.fromkeys(f"{prefix}{value}{suffix}" for value in values)
    return list(keys)
