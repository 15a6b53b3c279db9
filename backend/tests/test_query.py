"""Tests for query groups and in-memory matching."""

from __future__ import annotations

import pytest

from textsearcher import QueryConfigError, QueryGroup, match_str


def test_empty_group_rejected() -> None:
    with pytest.raises(QueryConfigError):
        QueryGroup([])


def test_empty_iterator_rejected() -> None:
    with pytest.raises(QueryConfigError):
        QueryGroup(group for group in [])


def test_generator_of_positions_accepted() -> None:
    group = QueryGroup(group for group in [["bar"], ["baz"]])
    assert len(group) == 2
    assert match_str(group, "bar baz")


def test_bare_string_position_rejected() -> None:
    with pytest.raises(QueryConfigError):
        QueryGroup(["bar"])  # type: ignore[list-item]


def test_one_pattern_per_position() -> None:
    group = QueryGroup([["bar"], ["baz", "xxxx哈哈"], ["中文"]])
    assert len(group) == 3
    assert group.sources == ["bar", r"baz|xxxx\s*哈\s*哈", r"中\s*文"]


def test_and_of_or_semantics() -> None:
    group = QueryGroup([["bar"], ["baz", "xxxx哈哈"]])
    assert match_str(group, "bar baz")
    assert match_str(group, "BAR and xxxx 哈 哈")
    assert not match_str(group, "bar only")
    assert not match_str(group, "baz only")


def test_order_of_positions_does_not_change_result() -> None:
    texts = ["bar baz", "baz", "qux bar", "哈哈 bar xxxx哈哈", ""]
    forward = QueryGroup([["bar"], ["baz", "xxxx哈哈"]])
    backward = QueryGroup([["baz", "xxxx哈哈"], ["bar"]])
    for text in texts:
        assert match_str(forward, text) == match_str(backward, text)


def test_anchored_places_primary_first() -> None:
    group = QueryGroup.anchored("hello world", [["a", "b"]])
    assert group.sources == [r"hello\s+world", "a|b"]
    assert group.leading.pattern == r"hello\s+world"


def test_anchored_without_groups() -> None:
    group = QueryGroup.anchored("中文")
    assert len(group) == 1
    assert match_str(group, "中 文")


def test_empty_or_group_matches_anything() -> None:
    group = QueryGroup([[]])
    assert match_str(group, "whatever")
