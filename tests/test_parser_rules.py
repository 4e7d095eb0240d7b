import math

import pytest

from parser_rules import (
    KEYWORDS_KIND,
    LINE_COUNT_KIND,
    coerce_count,
    normalize_strategy_kind,
    parse_keywords,
)


@pytest.mark.parametrize("value,expected", [
    (3, 3),
    ("3", 3),
    ("3abc", 3),
    (" 7 lines", 7),
    ("2.9", 2),
    (2.9, 2),
    ("abc", 1),
    ("", 1),
    (None, 1),
    (0, 1),
    ("0", 1),
    (-2, 1),
    ("-5", 1),
    (True, 1),
    (math.inf, 1),
    (math.nan, 1),
])
def test_coerce_count(value, expected):
    assert coerce_count(value) == expected


def test_coerce_count_default_is_still_at_least_one():
    assert coerce_count("x", default=4) == 4
    assert coerce_count("x", default=0) == 1


def test_parse_keywords():
    assert parse_keywords("Sun, MOON ,, star ") == frozenset({"sun", "moon", "star"})
    assert parse_keywords("a,A, a") == frozenset({"a"})
    assert parse_keywords(" , ") == frozenset()
    assert parse_keywords(None) == frozenset()
    assert parse_keywords(["Red", "  "]) == frozenset({"red"})


def test_parse_keywords_keeps_inner_spaces():
    assert parse_keywords("blue sky") == frozenset({"blue sky"})


def test_normalize_strategy_kind():
    assert normalize_strategy_kind("lines") == LINE_COUNT_KIND
    assert normalize_strategy_kind("LineCount") == LINE_COUNT_KIND
    assert normalize_strategy_kind("Keywords") == KEYWORDS_KIND
    assert normalize_strategy_kind(None) == LINE_COUNT_KIND
    assert normalize_strategy_kind("  ") == LINE_COUNT_KIND
    with pytest.raises(ValueError):
        normalize_strategy_kind("textrank")
