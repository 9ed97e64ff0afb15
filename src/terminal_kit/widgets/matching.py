"""Fuzzy matching for dropdowns and pickers.

Matching is subsequence based: every pattern character must appear in the
candidate in order. Scores reward consecutive runs and matches at word
boundaries and penalise gaps, so "fb" ranks "foo_bar" above "fooxbar".
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Protocol, Sequence, TypeVar

T = TypeVar("T")

SCORE_MATCH = 16
BONUS_CONSECUTIVE = 12
BONUS_BOUNDARY = 10
PENALTY_GAP = 1
TOKEN_BONUS = 5


class Matcher(Protocol):
    """Scores a pattern against a candidate; None means no match."""

    def score(self, pattern: str, candidate: str) -> Optional[int]:
        ...

    def indices(self, pattern: str, candidate: str) -> Optional[list[int]]:
        ...


def _is_boundary(candidate: str, idx: int) -> bool:
    if idx == 0:
        return True
    prev, cur = candidate[idx - 1], candidate[idx]
    if not prev.isalnum():
        return True
    return prev.islower() and cur.isupper()


def _find(folded: Sequence[str], ch: str, start: int) -> int:
    for idx in range(start, len(folded)):
        if folded[idx] == ch:
            return idx
    return -1


@dataclass(frozen=True)
class SubsequenceMatcher:
    """
    Default scorer.

    Matching is case-insensitive unless the pattern contains an uppercase
    character (smart case). Every occurrence of the first pattern
    character is tried as a starting point and the best alignment wins.
    """
    smart_case: bool = True

    def _fold(self, pattern: str, candidate: str) -> tuple[list[str], list[str]]:
        # fold per code point so positions stay valid in the original candidate
        if self.smart_case and any(ch.isupper() for ch in pattern):
            return list(pattern), list(candidate)
        return [ch.lower() for ch in pattern], [ch.lower() for ch in candidate]

    def _align(self, pattern: str, candidate: str) -> Optional[tuple[int, list[int]]]:
        if not pattern:
            return 0, []
        pat, cand = self._fold(pattern, candidate)
        if len(pat) > len(cand):
            return None

        best: Optional[tuple[int, list[int]]] = None
        start = _find(cand, pat[0], 0)
        while start != -1:
            positions = [start]
            pos = start
            for ch in pat[1:]:
                pos = _find(cand, ch, pos + 1)
                if pos == -1:
                    break
                positions.append(pos)
            else:
                total = self._score_positions(candidate, positions)
                if best is None or total > best[0]:
                    best = (total, positions)
            if len(positions) < len(pat):
                # later starts can only match fewer characters
                break
            start = _find(cand, pat[0], start + 1)
        return best

    @staticmethod
    def _score_positions(candidate: str, positions: Sequence[int]) -> int:
        total = 0
        prev = -1
        for idx in positions:
            total += SCORE_MATCH
            if _is_boundary(candidate, idx):
                total += BONUS_BOUNDARY
            if prev >= 0:
                if idx == prev + 1:
                    total += BONUS_CONSECUTIVE
                else:
                    total -= PENALTY_GAP * (idx - prev - 1)
            prev = idx
        # leading gap counts too, so earlier matches rank higher
        if positions:
            total -= PENALTY_GAP * positions[0]
        return total

    def score(self, pattern: str, candidate: str) -> Optional[int]:
        found = self._align(pattern, candidate)
        return None if found is None else found[0]

    def indices(self, pattern: str, candidate: str) -> Optional[list[int]]:
        found = self._align(pattern, candidate)
        return None if found is None else found[1]


DEFAULT_MATCHER = SubsequenceMatcher()


def fuzzy_indices_any_field(
    items: Sequence[T],
    query: str,
    fields: Callable[[T], Iterable[str]],
    matcher: Matcher = DEFAULT_MATCHER,
) -> list[int]:
    """
    Indices of items where any non-empty field matches, best first.

    A blank query keeps every item in its original order.
    """
    if not query.strip():
        return list(range(len(items)))

    scored: list[tuple[int, int]] = []
    for idx, item in enumerate(items):
        best: Optional[int] = None
        for text in fields(item):
            if not text:
                continue
            score = matcher.score(query, text)
            if score is not None and (best is None or score > best):
                best = score
        if best is not None:
            scored.append((idx, best))
    scored.sort(key=lambda pair: pair[1], reverse=True)
    return [idx for idx, _ in scored]


def fuzzy_match_tokenized_surface(
    query: str,
    surface: str,
    matcher: Matcher = DEFAULT_MATCHER,
) -> Optional[int]:
    """
    Score a whitespace-tokenized query against one searchable string.

    Every token must match on its own. The result is the better of the
    summed token scores and the whole query's score plus a per-token bonus.
    A blank query matches with score 0.
    """
    query = query.strip().lower()
    if not query:
        return 0
    surface = surface.lower()

    tokens = query.split()
    token_total = 0
    for token in tokens:
        score = matcher.score(token, surface)
        if score is None:
            return None
        token_total += score

    full = matcher.score(query, surface)
    if full is None:
        return token_total
    return max(token_total, full + TOKEN_BONUS * len(tokens))


def fuzzy_indices_tokenized_surface(
    items: Sequence[T],
    query: str,
    surface: Callable[[T], str],
    matcher: Matcher = DEFAULT_MATCHER,
) -> list[int]:
    """Indices of items whose surface matches every query token, best first."""
    if not query.strip():
        return list(range(len(items)))

    scored: list[tuple[int, int]] = []
    for idx, item in enumerate(items):
        score = fuzzy_match_tokenized_surface(query, surface(item), matcher)
        if score is not None:
            scored.append((idx, score))
    scored.sort(key=lambda pair: pair[1], reverse=True)
    return [idx for idx, _ in scored]
