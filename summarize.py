# summarize.py
"""
Extractive summaries by sentence position or by keyword.

Two strategies are supported:
  - LineCount(n): keep the first n sentences
  - Keywords(terms): keep sentences containing any term (case-insensitive substring)

Sentences come from a simple punctuation heuristic (see `segment`), which
does not know about abbreviations, decimals or quotes.
"""

import re
from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, FrozenSet, Iterable, List, Optional, Union

from logging_utils import get_logger
from parser_rules import (
    KEYWORDS_KIND,
    LINE_COUNT_KIND,
    coerce_count,
    normalize_strategy_kind,
    parse_keywords,
)

logger = get_logger(__name__)

# boundary = terminal mark, optional whitespace, then an uppercase letter.
# the whitespace is consumed by the split; the letter is not.
_sentence_boundary_re = re.compile(r'(?<=[.?!])\s*(?=[A-Z])')

NO_MATCH_MESSAGE = "No sentences found matching the given keywords."
EMPTY_INPUT_MESSAGE = "Please enter or upload some text to summarize"
DEFAULT_LINE_COUNT = 3


class EmptyInputError(ValueError):
    """Raised when the text to summarize is empty after trimming."""

    code = "EMPTY_INPUT"

    def __init__(self, message: str = EMPTY_INPUT_MESSAGE) -> None:
        super().__init__(message)
        self.message = message


@dataclass(frozen=True)
class LineCount:
    count: int = DEFAULT_LINE_COUNT
    kind: ClassVar[str] = LINE_COUNT_KIND

    def __post_init__(self) -> None:
        object.__setattr__(self, "count", coerce_count(self.count))


@dataclass(frozen=True)
class Keywords:
    terms: FrozenSet[str] = field(default_factory=frozenset)
    kind: ClassVar[str] = KEYWORDS_KIND

    def __post_init__(self) -> None:
        terms = self.terms
        if isinstance(terms, str):
            terms = [terms]
        object.__setattr__(self, "terms", parse_keywords(terms))

    @classmethod
    def from_string(cls, raw: Optional[str]) -> "Keywords":
        return cls(parse_keywords(raw))


StrategyConfig = Union[LineCount, Keywords]


def strategy_from_params(kind: Optional[str], count: Any = None, keywords: Optional[str] = None,
                         default_count: int = DEFAULT_LINE_COUNT) -> StrategyConfig:
    """Build a strategy from loose form/JSON values. Raises ValueError on an unknown kind."""
    kind = normalize_strategy_kind(kind)
    if kind == KEYWORDS_KIND:
        return Keywords.from_string(keywords)
    if count is None or (isinstance(count, str) and not count.strip()):
        return LineCount(default_count)
    return LineCount(count)


def segment(text: Optional[str]) -> List[str]:
    """Split text into trimmed, non-empty sentences in reading order."""
    if not text:
        return []
    parts = _sentence_boundary_re.split(text)
    return [p.strip() for p in parts if p.strip()]


def select_by_count(sentences: List[str], count: Any) -> List[str]:
    n = coerce_count(count)
    return list(sentences[:min(n, len(sentences))])


def select_by_keywords(sentences: List[str], keywords: Union[str, Keywords, Iterable[str], None]) -> List[str]:
    """Keep sentences whose lowercase form contains at least one keyword."""
    if isinstance(keywords, Keywords):
        terms = keywords.terms
    else:
        terms = parse_keywords(keywords)
    if not terms:
        return []
    return [s for s in sentences if any(t in s.lower() for t in terms)]


def summarize(text: Optional[str], strategy: StrategyConfig) -> str:
    """
    Summarize `text` with the given strategy.

    Raises EmptyInputError for blank input, before any segmentation.
    A keyword search with no hits returns NO_MATCH_MESSAGE rather than failing.
    """
    if not text or not text.strip():
        raise EmptyInputError()

    sentences = segment(text)
    logger.debug(f"Segmented {len(sentences)} sentences for {getattr(strategy, 'kind', '?')} summary")

    if isinstance(strategy, LineCount):
        return " ".join(select_by_count(sentences, strategy.count))
    if isinstance(strategy, Keywords):
        joined = " ".join(select_by_keywords(sentences, strategy))
        return joined or NO_MATCH_MESSAGE
    raise TypeError(f"unsupported strategy: {type(strategy).__name__}")


def summarize_result(text: Optional[str], strategy: StrategyConfig) -> Dict[str, Any]:
    """Caller-facing envelope: {"ok": True, "summary": ...} or {"ok": False, "error": ...}."""
    try:
        return {"ok": True, "summary": summarize(text, strategy)}
    except EmptyInputError as e:
        return {"ok": False, "error": e.code, "detail": e.message}
