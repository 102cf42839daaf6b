# patchwright/match/similarity.py
"""
Edit-distance similarity.

    similarity(a, b) = 1 - levenshtein(a, b) / max(len(a), len(b), 1)

computed on normalized text. Symmetric, bounded to [0, 1], 1.0 only for
texts that are identical after normalization.
"""
from __future__ import annotations

from collections import Counter
from typing import Mapping, Tuple

from rapidfuzz.distance import Levenshtein

from ..utils.text import normalize

__all__ = [
    "SIMILARITY_THRESHOLD",
    "similarity",
    "edit_distance",
    "ratio_from_distance",
    "meets_threshold",
    "best_substring",
    "char_deficit",
]

# Fixed acceptance threshold for fuzzy matches. Part of the engine's contract.
SIMILARITY_THRESHOLD = 0.85

_EPSILON = 1e-9


def edit_distance(a: str, b: str, *, max_distance: int | None = None) -> int:
    """
    Levenshtein distance (unit cost insert/delete/substitute).

    With `max_distance`, any result above it is reported as max_distance + 1,
    which lets callers bail out of hopeless comparisons early.
    """
    return Levenshtein.distance(a, b, score_cutoff=max_distance)


def ratio_from_distance(distance: int, len_a: int, len_b: int) -> float:
    """Turn a distance into the bounded ratio. Two empty strings score 1.0."""
    return 1.0 - distance / max(len_a, len_b, 1)


def similarity(a: str, b: str) -> float:
    a, b = normalize(a), normalize(b)
    if not a and not b:
        return 1.0
    if not a or not b:
        return 0.0
    return ratio_from_distance(edit_distance(a, b), len(a), len(b))


def meets_threshold(score: float, threshold: float = SIMILARITY_THRESHOLD) -> bool:
    """True when `score` reaches `threshold`, ignoring float noise."""
    return score + _EPSILON >= threshold


def char_deficit(needle_counts: Mapping[str, int], haystack: str) -> int:
    """
    Characters of the needle that `haystack` cannot supply.

    Each of them costs at least one edit, so this is a lower bound on the
    distance between the needle and any substring of `haystack`.
    """
    have = Counter(haystack)
    return sum(max(0, n - have.get(ch, 0)) for ch, n in needle_counts.items())


def best_substring(needle: str, haystack: str) -> Tuple[int, int, int]:
    """
    Find the substring of `haystack` closest to `needle` by edit distance.

    Returns (start, end, distance). Among equally close substrings the one
    ending earliest wins, so results are deterministic.
    """
    m, n = len(needle), len(haystack)
    if m == 0:
        return 0, 0, 0

    # Row i holds the cost of aligning needle[:i] with a substring ending at j;
    # starting anywhere in the haystack is free.
    prev = [0] * (n + 1)
    prev_start = list(range(n + 1))
    for i in range(1, m + 1):
        ch = needle[i - 1]
        cur = [i] + [0] * n
        cur_start = [0] * (n + 1)
        for j in range(1, n + 1):
            cost = prev[j - 1] + (haystack[j - 1] != ch)
            start = prev_start[j - 1]
            if prev[j] + 1 < cost:
                cost = prev[j] + 1
                start = prev_start[j]
            if cur[j - 1] + 1 < cost:
                cost = cur[j - 1] + 1
                start = cur_start[j - 1]
            cur[j] = cost
            cur_start[j] = start
        prev, prev_start = cur, cur_start

    end = min(range(n + 1), key=prev.__getitem__)
    return prev_start[end], end, prev[end]
