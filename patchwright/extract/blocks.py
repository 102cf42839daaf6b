# patchwright/extract/blocks.py
"""
SEARCH/REPLACE block parsing.

Each block is three marker lines with free text between them:

    <<<<<<< SEARCH
    text to find
    =======
    text to put there instead
    >>>>>>> REPLACE

Blocks may follow each other directly, and anything outside a block (prose,
markdown fences) is ignored. Parsing is line based so a broken block cannot
swallow the well-formed blocks after it.
"""
from __future__ import annotations

import logging
import re
from typing import List

from .._logging import resolve_logger
from ..errors.parse import ParseError
from ..models.blocks import DiffBlock
from ..utils.text import normalize_line_endings

__all__ = ["parse_blocks", "OPEN_MARKER", "SEPARATOR_MARKER", "CLOSE_MARKER"]

OPEN_MARKER = "<<<<<<< SEARCH"
SEPARATOR_MARKER = "======="
CLOSE_MARKER = ">>>>>>> REPLACE"

_OPEN_RE = re.compile(r"^[ \t]*<{7}[ \t]*SEARCH[ \t]*$")
_SEP_RE = re.compile(r"^[ \t]*={7}[ \t]*$")
_CLOSE_RE = re.compile(r"^[ \t]*>{7}[ \t]*REPLACE[ \t]*$")

_IDLE, _SEARCH, _REPLACE = "idle", "search", "replace"


def parse_blocks(
    diff_text: str,
    *,
    logger: logging.Logger | None = None,
    log: bool = False,
) -> List[DiffBlock]:
    """
    Extract the ordered SEARCH/REPLACE blocks from `diff_text`.

    Line endings inside the blocks are normalized to "\\n"; nothing else is
    altered. Malformed fragments (unterminated blocks, a closing marker with
    no separator) are skipped.

    Raises:
        ParseError: if no complete block is found, or a block's SEARCH text is
            empty or whitespace only.
    """
    lg = resolve_logger(logger=logger, enabled=log, name=__name__)

    blocks: List[DiffBlock] = []
    state = _IDLE
    search: List[str] = []
    replace: List[str] = []
    opened_at = 0

    for lineno, line in enumerate(normalize_line_endings(diff_text).split("\n"), 1):
        if _OPEN_RE.match(line):
            if state != _IDLE:
                lg.debug("line %d: new SEARCH marker inside open block from line %d; dropping it", lineno, opened_at)
            state, search, replace, opened_at = _SEARCH, [], [], lineno
            continue

        if state == _SEARCH:
            if _SEP_RE.match(line):
                state = _REPLACE
            elif _CLOSE_RE.match(line):
                lg.debug("line %d: REPLACE marker without separator; dropping block from line %d", lineno, opened_at)
                state = _IDLE
            else:
                search.append(line)
        elif state == _REPLACE:
            if _CLOSE_RE.match(line):
                blocks.append(_make_block(len(blocks), search, replace, opened_at))
                state = _IDLE
            else:
                replace.append(line)

    if state != _IDLE:
        lg.debug("unterminated block from line %d ignored", opened_at)

    if not blocks:
        raise ParseError(
            "No SEARCH/REPLACE blocks found in diff text. Each block needs "
            f"'{OPEN_MARKER}', '{SEPARATOR_MARKER}' and '{CLOSE_MARKER}' on their own lines."
        )
    lg.debug("parsed %d block(s)", len(blocks))
    return blocks


def _make_block(index: int, search: List[str], replace: List[str], line: int) -> DiffBlock:
    # DiffBlock rejects an empty SEARCH section with a ParseError.
    return DiffBlock(index=index, search="\n".join(search), replace="\n".join(replace), line=line)
