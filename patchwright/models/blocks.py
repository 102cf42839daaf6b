from dataclasses import dataclass

from ..errors.parse import ParseError


@dataclass(frozen=True)
class DiffBlock:
    """One SEARCH/REPLACE pair, in the order it appeared in the diff text."""

    index: int
    search: str
    replace: str
    line: int = 0  # 1-based line of the opening marker in the diff text

    def __post_init__(self) -> None:
        # An empty search would match at offset 0 of any content.
        if not self.search.strip():
            where = f" (line {self.line})" if self.line else ""
            raise ParseError(
                f"Block {self.index + 1}{where} has an empty SEARCH section; "
                "an empty search would match anywhere.",
                block_index=self.index,
            )


@dataclass(frozen=True)
class MatchCandidate:
    """A span of the working content that a block's search text corresponds to."""

    start_offset: int     # inclusive, into the original (non-normalized) content
    end_offset: int       # exclusive
    similarity: float     # 1.0 for exact matches
    line_number: int      # 1-based line where the span starts
    content: str          # original text of the span

    @property
    def percent(self) -> int:
        """Similarity as a whole percentage, rounded down."""
        return int(self.similarity * 100 + 1e-9)
