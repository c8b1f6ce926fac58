"""Phrase matching strategies for term-list rules."""

from __future__ import annotations

import re
from enum import Enum
from functools import lru_cache
from typing import Iterable


class MatchStrategy(str, Enum):
    """How catalog phrases are located in text.

    SUBSTRING finds a phrase anywhere, including inside longer words
    ("unmarried" contains "married"). WORD_BOUNDARY requires the phrase
    to start and end on a word boundary.
    """

    SUBSTRING = "substring"
    WORD_BOUNDARY = "word_boundary"


@lru_cache(maxsize=1024)
def _boundary_pattern(term: str) -> re.Pattern[str]:
    return re.compile(rf"\b{re.escape(term)}\b", re.IGNORECASE)


def contains_term(text: str, term: str, strategy: MatchStrategy = MatchStrategy.SUBSTRING) -> bool:
    """Check whether a single phrase occurs in text, ignoring case."""
    if not term:
        return False
    if strategy == MatchStrategy.WORD_BOUNDARY:
        return _boundary_pattern(term).search(text) is not None
    return term.lower() in text.lower()


def find_terms(
    text: str,
    terms: Iterable[str],
    strategy: MatchStrategy = MatchStrategy.SUBSTRING,
) -> list[str]:
    """Find every phrase from terms that occurs in text.

    Args:
        text: Text to scan
        terms: Phrases to look for
        strategy: Matching strategy

    Returns:
        Matching phrases in the order they were given
    """
    lowered = text.lower()
    if strategy == MatchStrategy.SUBSTRING:
        return [term for term in terms if term and term.lower() in lowered]
    return [term for term in terms if contains_term(lowered, term, strategy)]


def any_term(
    text: str,
    terms: Iterable[str],
    strategy: MatchStrategy = MatchStrategy.SUBSTRING,
) -> bool:
    """Check whether any phrase from terms occurs in text."""
    return any(contains_term(text, term, strategy) for term in terms)


def _is_word_char(char: str) -> bool:
    return char.isalnum() or char == "_"


def _bounded(text: str, start: int, end: int) -> bool:
    if start > 0 and _is_word_char(text[start - 1]) and _is_word_char(text[start]):
        return False
    if end < len(text) and _is_word_char(text[end - 1]) and _is_word_char(text[end]):
        return False
    return True


def search_pattern(
    text: str,
    pattern: re.Pattern[str],
    strategy: MatchStrategy = MatchStrategy.SUBSTRING,
) -> re.Match[str] | None:
    """Find the first match of a compiled pattern under a strategy.

    With WORD_BOUNDARY a match counts only if it does not start or end in
    the middle of a word, so "rs" is not found in "offers". Edges that
    are themselves punctuation, such as a leading currency sign, are
    always bounded.

    Returns:
        The first accepted match, or None
    """
    if strategy == MatchStrategy.SUBSTRING:
        return pattern.search(text)

    pos = 0
    while pos <= len(text):
        match = pattern.search(text, pos)
        if match is None:
            return None
        if match.end() > match.start() and _bounded(text, match.start(), match.end()):
            return match
        pos = match.start() + 1
    return None
