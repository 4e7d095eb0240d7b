# parser_rules.py
import math
import re
from typing import Any, FrozenSet, Iterable, Optional, Union

# leading integer of a form value, like parseInt: "3 lines" -> 3, "2.9" -> 2
LEADING_INT_RE = re.compile(r'^\s*(?P<num>[+-]?\d+)')

LINE_COUNT_KIND = "lineCount"
KEYWORDS_KIND = "keywords"

# form values the host may send for each strategy
KIND_ALIASES = {
    "linecount": LINE_COUNT_KIND,
    "line_count": LINE_COUNT_KIND,
    "lines": LINE_COUNT_KIND,
    "count": LINE_COUNT_KIND,
    "keywords": KEYWORDS_KIND,
    "keyword": KEYWORDS_KIND,
}


def coerce_count(value: Any, default: int = 1) -> int:
    """Return a line count >= 1; anything unparsable falls back to `default`."""
    n: Optional[int] = None
    if isinstance(value, bool):
        n = None
    elif isinstance(value, int):
        n = value
    elif isinstance(value, float):
        if math.isfinite(value):
            n = int(value)
    elif isinstance(value, str):
        m = LEADING_INT_RE.match(value)
        if m:
            n = int(m.group('num'))
    if not n:
        n = default
    return max(1, n)


def parse_keywords(raw: Union[str, Iterable[str], None]) -> FrozenSet[str]:
    """
    Split a comma-separated keyword string into a set of lowercase terms.
    Blank pieces are dropped, so ",, ," yields an empty set.
    An iterable of terms is normalised the same way.
    """
    if raw is None:
        return frozenset()
    pieces = raw.split(',') if isinstance(raw, str) else raw
    terms = (str(p).strip().lower() for p in pieces)
    return frozenset(t for t in terms if t)


def normalize_strategy_kind(kind: Optional[str]) -> str:
    """Map a host-supplied strategy name onto lineCount / keywords."""
    if kind is None:
        return LINE_COUNT_KIND
    key = str(kind).strip().lower()
    if not key:
        return LINE_COUNT_KIND
    try:
        return KIND_ALIASES[key]
    except KeyError:
        raise ValueError(f"unknown summary strategy: {kind!r}") from None
