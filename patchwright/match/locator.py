# patchwright/match/locator.py
from __future__ import annotations

import logging
from collections import Counter
from typing import Iterator, List, Tuple

from .._logging import resolve_logger
from ..models.blocks import MatchCandidate
from ..utils.text import NormalizedText, normalize, normalize_text
from .similarity import (
    best_substring,
    char_deficit,
    edit_distance,
    meets_threshold,
    ratio_from_distance,
)

__all__ = ["locate_match", "find_exact", "find_fuzzy"]


def _candidate(nt: NormalizedText, start: int, end: int, score: float) -> MatchCandidate:
    o_start, o_end = nt.to_original(start, end)
    return MatchCandidate(
        start_offset=o_start,
        end_offset=o_end,
        similarity=score,
        line_number=nt.line_number(start),
        content=nt.original[o_start:o_end],
    )


def find_exact(nt: NormalizedText, needle: str) -> MatchCandidate | None:
    """First (lowest offset) verbatim occurrence of the normalized needle."""
    idx = nt.canonical.find(needle)
    if idx == -1:
        return None
    return _candidate(nt, idx, idx + len(needle), 1.0)


def _line_windows(canonical: str, k: int) -> Iterator[Tuple[int, int]]:
    """Canonical spans of every run of `k` consecutive lines, top to bottom."""
    lines = canonical.split("\n")
    if len(lines) < k:
        yield 0, len(canonical)
        return
    starts: List[int] = []
    pos = 0
    for line in lines:
        starts.append(pos)
        pos += len(line) + 1
    for i in range(len(lines) - k + 1):
        last = i + k - 1
        yield starts[i], starts[last] + len(lines[last])


def _score_bound(best: float, longest: int) -> int:
    """Largest distance that could still beat `best` for a text of `longest` chars."""
    if best < 0:
        return longest
    return int((1.0 - best) * longest) + 1


def find_fuzzy(nt: NormalizedText, needle: str) -> MatchCandidate | None:
    """
    Slide a window of as many lines as the needle has over the content and
    return the best-scoring window, earliest on ties. Below-threshold
    windows are returned too; the caller decides what to accept.
    """
    if not needle:
        return None
    canonical = nt.canonical
    k = needle.count("\n") + 1
    m = len(needle)
    needle_counts = Counter(needle)

    best: Tuple[float, int, int] | None = None  # (score, start, end)
    best_score = -1.0

    for w_start, w_end in _line_windows(canonical, k):
        window = canonical[w_start:w_end]
        w = len(window)
        longest = max(w, m, 1)

        # Whole window. Lengths alone put a floor under the distance.
        if w and abs(w - m) <= _score_bound(best_score, longest):
            d = edit_distance(window, needle, max_distance=_score_bound(best_score, longest))
            score = ratio_from_distance(d, w, m)
            if score > best_score:
                best, best_score = (score, w_start, w_end), score

        # A one-line needle may name a fragment of the line: score the best
        # aligned substring as well.
        if k == 1 and w > m:
            deficit = char_deficit(needle_counts, window)
            if m / (m + deficit) <= best_score:
                continue
            s, e, d = best_substring(needle, window)
            score = ratio_from_distance(d, e - s, m)
            if score > best_score:
                best, best_score = (score, w_start + s, w_start + e), score

    if best is None:
        return None
    score, start, end = best
    return _candidate(nt, start, end, max(score, 0.0))


def locate_match(
    content: str,
    search: str,
    *,
    logger: logging.Logger | None = None,
    log: bool = False,
) -> Tuple[MatchCandidate | None, MatchCandidate | None]:
    """
    Locate `search` inside `content`.

    Returns (accepted, best): `accepted` is the candidate to apply, or None;
    `best` is the closest candidate seen, even when it fell below the
    similarity threshold, so failures can say how close they came.
    Exact matches always win and score 1.0; the first occurrence is used.
    """
    lg = resolve_logger(logger=logger, enabled=log, name=__name__)
    nt = normalize_text(content)
    needle = normalize(search)

    exact = find_exact(nt, needle)
    if exact is not None:
        lg.debug("exact match at line %d [%d:%d]", exact.line_number, exact.start_offset, exact.end_offset)
        return exact, exact

    fuzzy = find_fuzzy(nt, needle)
    if fuzzy is None:
        lg.debug("no fuzzy candidate")
        return None, None
    if meets_threshold(fuzzy.similarity):
        lg.debug("fuzzy match at line %d, similarity=%.4f", fuzzy.line_number, fuzzy.similarity)
        return fuzzy, fuzzy
    lg.debug("best fuzzy candidate at line %d below threshold, similarity=%.4f", fuzzy.line_number, fuzzy.similarity)
    return None, fuzzy
