from __future__ import annotations

import pytest

from redis_locker.core.errors import InvalidPattern
from redis_locker.core.patterns import build_pattern_keys


def test_values_substituted_in_order():
    assert build_pattern_keys("user:{}", ["b", "a", "c"]) == ["user:b", "user:a", "user:c"]


def test_duplicates_collapse():
    assert build_pattern_keys("item:{}:lock", ["a", "b", "a"]) == ["item:a:lock", "item:b:lock"]


def test_non_string_values_are_stringified():
    assert build_pattern_keys("order:{}", [1, 2, "1"]) == ["order:1", "order:2"]


def test_placeholder_at_edges():
    assert build_pattern_keys("{}", ["x"]) == ["x"]
    assert build_pattern_keys("{}:suffix", ["x"]) == ["x:suffix"]


def test_no_values_gives_no_keys():
    assert build_pattern_keys("item:{}", []) == []


@pytest.mark.parametrize("template", ["item:lock", "{}:{}", "{}{}{}", "item:{ }"])
def test_template_needs_exactly_one_placeholder(template):
    with pytest.raises(InvalidPattern):
        build_pattern_keys(template, ["a"])


def test_template_must_be_string():
    with pytest.raises(InvalidPattern):
        build_pattern_keys(None, ["a"])  # type: ignore[arg-type]
