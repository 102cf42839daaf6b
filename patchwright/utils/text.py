# patchwright/utils/text.py
"""
Comparison-only normalization.

This module is the one place that decides what "the same text" means when
matching a SEARCH block against file content. Nothing produced here is ever
written back to a file: the canonical form only exists while matching, and
:class:`NormalizedText` keeps the way back to the original offsets.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

__all__ = [
    "NormalizedText",
    "normalize",
    "normalize_text",
    "normalize_line_endings",
    "detect_eol",
]

# One character in, one character out: the offset table depends on it.
_PUNCTUATION = {
    "\u2018": "'", "\u2019": "'", "\u201A": "'", "\u201B": "'",
    "\u2032": "'",
    "\u201C": '"', "\u201D": '"', "\u201E": '"', "\u201F": '"',
    "\u2033": '"',
    "\u2010": "-", "\u2011": "-", "\u2012": "-", "\u2013": "-",
    "\u2014": "-", "\u2015": "-", "\u2212": "-",
}
_TRAILING_WS = (" ", "\t")


@dataclass(frozen=True)
class NormalizedText:
    """
    Canonical view of a text span.

    `starts[k]` / `ends[k]` give the original span that produced canonical
    character k (a "\\r\\n" pair collapses into one "\\n" spanning two
    original characters).
    """

    original: str
    canonical: str
    starts: Tuple[int, ...]
    ends: Tuple[int, ...]

    def to_original(self, start: int, end: int) -> Tuple[int, int]:
        """
        Map a canonical span [start, end) back to original offsets.

        A span that ends a line also covers the trailing blanks that
        normalization dropped from that line.
        """
        if end <= start:
            pos = self.starts[start] if start < len(self.starts) else len(self.original)
            return pos, pos
        o_end = self.ends[end - 1]
        at_line_end = end == len(self.canonical) or self.canonical[end] == "\n"
        if at_line_end and self.canonical[end - 1] != "\n":
            # Take in the blanks dropped between the span and the line end.
            o_end = self.starts[end] if end < len(self.starts) else len(self.original)
        return self.starts[start], o_end

    def line_number(self, pos: int) -> int:
        """1-based line number of canonical position `pos`."""
        return self.canonical.count("\n", 0, pos) + 1


def normalize_text(text: str) -> NormalizedText:
    """Build the canonical form of `text` together with its offset table."""
    out: List[str] = []
    starts: List[int] = []
    ends: List[int] = []
    # Blanks are held back until we know whether anything but a line end follows.
    pending: List[Tuple[str, int]] = []

    i, n = 0, len(text)
    while i < n:
        ch = text[i]
        if ch in _TRAILING_WS:
            pending.append((ch, i))
            i += 1
            continue
        if ch == "\r" or ch == "\n":
            width = 2 if text.startswith("\r\n", i) else 1
            pending.clear()
            out.append("\n")
            starts.append(i)
            ends.append(i + width)
            i += width
            continue
        for p_ch, p_i in pending:
            out.append(p_ch)
            starts.append(p_i)
            ends.append(p_i + 1)
        pending.clear()
        out.append(_PUNCTUATION.get(ch, ch))
        starts.append(i)
        ends.append(i + 1)
        i += 1

    return NormalizedText(text, "".join(out), tuple(starts), tuple(ends))


def normalize(text: str) -> str:
    """
    Canonical comparison form of `text`.

    - "\\r\\n" and "\\r" become "\\n"
    - curly quotes, primes and the dash family become ASCII
    - spaces/tabs at the end of every line are dropped, the last line included
    Runs of whitespace inside a line are left alone, so tabs and spaces stay
    distinguishable. Idempotent: normalize(normalize(x)) == normalize(x).
    """
    return normalize_text(text).canonical


def normalize_line_endings(text: str) -> str:
    """Collapse "\\r\\n" and "\\r" to "\\n" without touching anything else."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def detect_eol(text: str) -> str:
    """Dominant line ending of `text`, defaulting to "\\n"."""
    if "\r\n" in text:
        return "\r\n"
    if "\r" in text:
        return "\r"
    return "\n"
