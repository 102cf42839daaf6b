# patchwright/commit/patch.py
from __future__ import annotations

import logging
from typing import List, Sequence

from .._logging import resolve_logger
from ..errors.apply import EmptyContentError
from ..extract.blocks import parse_blocks
from ..match.locator import locate_match
from ..models.blocks import DiffBlock
from ..models.result import Applied, BlockOutcome, PatchResult
from ..utils.text import detect_eol
from .report import build_failure, build_result

__all__ = ["apply_diff", "apply_blocks"]


def _render_replacement(replace: str, eol: str) -> str:
    """Replacement text as written: its own characters, the buffer's line ending."""
    return replace if eol == "\n" else replace.replace("\n", eol)


def apply_blocks(
    content: str,
    blocks: Sequence[DiffBlock],
    *,
    logger: logging.Logger | None = None,
    log: bool = False,
) -> PatchResult:
    """
    Apply already-parsed blocks to `content`, strictly in the given order.

    Every block is located in the buffer as left by the blocks before it.
    A block that cannot be placed leaves the buffer untouched and does not
    stop the blocks after it.
    """
    lg = resolve_logger(logger=logger, enabled=log, name=__name__)

    buffer = content
    eol = detect_eol(content)
    outcomes: List[BlockOutcome] = []

    for block in blocks:
        accepted, best = locate_match(buffer, block.search, logger=logger, log=log)
        if accepted is None:
            failure = build_failure(block, best)
            lg.debug("block %d failed: %s", block.index + 1, failure.reason)
            outcomes.append(failure)
            continue

        start, end = accepted.start_offset, accepted.end_offset
        buffer = buffer[:start] + _render_replacement(block.replace, eol) + buffer[end:]
        lg.debug(
            "block %d applied at line %d [%d:%d], similarity=%.4f",
            block.index + 1, accepted.line_number, start, end, accepted.similarity,
        )
        outcomes.append(Applied(index=block.index, candidate=accepted))

    result = build_result(buffer, outcomes)
    lg.debug("applied %d/%d block(s)", result.applied_count, len(outcomes))
    return result


def apply_diff(
    original_content: str,
    diff_text: str,
    *,
    logger: logging.Logger | None = None,
    log: bool = False,
) -> PatchResult:
    """
    Apply SEARCH/REPLACE `diff_text` to `original_content`.

    Pure and stateless: the result depends only on the two arguments. Blocks
    that cannot be matched are reported in `failed_blocks`; they never raise.

    Raises:
        EmptyContentError: if `original_content` is empty. Create the file
            with its full content instead of diffing against nothing.
        ParseError: if `diff_text` holds no usable blocks. No block is applied.
    """
    if not original_content:
        raise EmptyContentError(
            "Cannot apply a diff to empty content; create the file with its full content instead."
        )
    blocks = parse_blocks(diff_text, logger=logger, log=log)
    return apply_blocks(original_content, blocks, logger=logger, log=log)
