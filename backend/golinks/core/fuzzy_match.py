"""Fuzzy Matching — scorer protocol and the unambiguous-candidate policy.

Invariants:
    - Scores are in [0.0, 1.0]; comparison is case-insensitive
    - A match is returned only when exactly one candidate reaches the threshold
    - Zero or several qualifying candidates yield None (never "best of several")

Design Decisions:
    - Scorer is a Protocol so the algorithm is swappable without touching the
      disambiguation policy
    - difflib.SequenceMatcher ratio catches typos; PartialRatioScorer adds a
      sliding-window ratio so a prefix or fragment of a name also qualifies
    - False negatives (user retypes) preferred over false positives (wrong redirect)
"""

import difflib
from typing import Iterable, Protocol, TypeVar

T = TypeVar("T")

DEFAULT_THRESHOLD = 0.8
MIN_PARTIAL_LENGTH = 3


class Scorer(Protocol):
    """Similarity between a query and a candidate name."""
    def score(self, query: str, candidate: str) -> float: ...


class SequenceMatcherScorer:
    """difflib ratio over lowercased text."""

    def score(self, query: str, candidate: str) -> float:
        return _ratio(query.lower(), candidate.lower())


class PartialRatioScorer:
    """Best of the full ratio and the best same-length window of the candidate.

    A query shorter than the name is also compared against every slice of the
    name with the query's length, so "git" scores 1.0 against "github". Queries
    under min_partial_length only get the full ratio.
    """

    def __init__(self, min_partial_length: int = MIN_PARTIAL_LENGTH):
        self.min_partial_length = min_partial_length

    def score(self, query: str, candidate: str) -> float:
        q, c = query.lower(), candidate.lower()
        full = _ratio(q, c)
        if len(q) < self.min_partial_length or len(q) >= len(c):
            return full
        width = len(q)
        partial = max(_ratio(q, c[i:i + width]) for i in range(len(c) - width + 1))
        return max(full, partial)


def _ratio(a: str, b: str) -> float:
    return difflib.SequenceMatcher(None, a, b, autojunk=False).ratio()


def rank_candidates(
    query: str,
    candidates: Iterable[tuple[str, T]],
    scorer: Scorer,
    threshold: float = DEFAULT_THRESHOLD,
) -> list[tuple[float, T]]:
    """All (score, item) pairs at or above threshold, best first."""
    ranked = [
        (s, item)
        for text, item in candidates
        if (s := scorer.score(query, text)) >= threshold
    ]
    ranked.sort(key=lambda pair: pair[0], reverse=True)
    return ranked


def select_unambiguous(
    query: str,
    candidates: Iterable[tuple[str, T]],
    scorer: Scorer,
    threshold: float = DEFAULT_THRESHOLD,
) -> T | None:
    """The single qualifying candidate, or None when there are zero or several."""
    ranked = rank_candidates(query, candidates, scorer, threshold)
    if len(ranked) != 1:
        return None
    return ranked[0][1]
