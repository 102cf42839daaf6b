# patchwright/commit/report.py
"""
Failure diagnostics.

An autonomous agent reads these strings to correct its next attempt, so each
failed block says what was searched for, how close the closest region came,
and where it is.
"""
from __future__ import annotations

import re
from typing import Iterable, List

from ..models.blocks import DiffBlock, MatchCandidate
from ..models.result import BlockOutcome, Failed, FailureKind, PatchResult

__all__ = [
    "PREVIEW_CHARS",
    "PARTIAL_MATCH_SIMILARITY",
    "build_failure",
    "build_result",
    "search_preview",
    "format_failure_message",
    "suggest_next_step",
]

PREVIEW_CHARS = 80
# Above this, the failing region most likely exists but changed since it was read.
PARTIAL_MATCH_SIMILARITY = 0.5

_WS_RUN_RE = re.compile(r"  |\t")


def _clip(text: str, limit: int = PREVIEW_CHARS) -> str:
    return text if len(text) <= limit else text[:limit] + "..."


def search_preview(search: str) -> str:
    """First non-blank line of a search text, clipped for display."""
    for line in search.split("\n"):
        if line.strip():
            return _clip(line)
    return ""


def build_failure(block: DiffBlock, best: MatchCandidate | None) -> Failed:
    """
    Failure record for a block the locator could not place.

    A best candidate sharing nothing with the search (0%) is still attached,
    but the block counts as having no match.
    """
    preview = search_preview(block.search)
    if best is None or best.similarity <= 0.0:
        return Failed(
            index=block.index,
            kind=FailureKind.NO_MATCH,
            reason="no similar content found",
            search_preview=preview,
            best_match=best,
        )
    return Failed(
        index=block.index,
        kind=FailureKind.BELOW_THRESHOLD,
        reason=f"best match below threshold ({best.percent}%)",
        search_preview=preview,
        best_match=best,
    )


def build_result(content: str, outcomes: Iterable[BlockOutcome]) -> PatchResult:
    return PatchResult(content=content, outcomes=tuple(outcomes))


def _escape_newlines(text: str) -> str:
    return text.replace("\n", "\\n")


def format_failure_message(result: PatchResult, path: str) -> str:
    """Multi-line description of every failed block, for the agent to read."""
    failed = result.failed_blocks
    if not failed:
        return ""
    parts: List[str] = [f"Failed to apply {len(failed)} diff block(s) to {path}."]
    for fb in failed:
        parts.append(f"\n[Block {fb.index + 1}] {fb.reason}")
        if fb.kind is FailureKind.BELOW_THRESHOLD and fb.best_match is not None:
            bm = fb.best_match
            parts.append(f"  Best match found at line {bm.line_number} ({bm.percent}% similar):")
            parts.append(f'  File content: "{_escape_newlines(_clip(bm.content))}"')
        parts.append(f'  Searched for: "{_escape_newlines(fb.search_preview)}"')
    return "\n".join(parts)


def suggest_next_step(result: PatchResult) -> str:
    """What the caller should do after a (partially) failed patch; '' if nothing."""
    failed = result.failed_blocks
    if not failed:
        return ""

    hints: List[str] = []
    if any(fb.best_match is not None and fb.best_match.similarity > PARTIAL_MATCH_SIMILARITY for fb in failed):
        hints.append("The file content has changed since it was last read. Re-read the file to get the current content.")
    else:
        hints.append("No similar content was found. Check the file path and re-read the file to verify its content.")
    if any(_WS_RUN_RE.search(fb.search_preview) for fb in failed):
        hints.append("Watch for indentation differences - tabs vs spaces or extra/missing spaces.")
    return " ".join(hints)
