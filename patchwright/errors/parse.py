from __future__ import annotations

from .base import PatchwrightError


class ParseError(PatchwrightError):
    """
    Raised when diff text cannot be turned into SEARCH/REPLACE blocks.

    `block_index` is set when one specific block is at fault (e.g. an empty
    SEARCH section); it is None when the text holds no blocks at all.
    """

    def __init__(self, message: str, *, block_index: int | None = None) -> None:
        super().__init__(message)
        self.block_index = block_index
