"""
Per-block outcomes and the aggregate result of one ``apply_diff`` call.

`BlockOutcome` is a tagged union of :class:`Applied` and :class:`Failed`;
match on the class (``isinstance`` or ``match``) rather than on optional
fields. `PatchResult` derives its counters from the ordered outcomes, so
``applied_count + len(failed_blocks) == len(outcomes)`` always holds.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Tuple, Union

from .blocks import MatchCandidate


class FailureKind(str, enum.Enum):
    NO_MATCH = "no_match"
    BELOW_THRESHOLD = "below_threshold"


@dataclass(frozen=True)
class Applied:
    index: int
    candidate: MatchCandidate


@dataclass(frozen=True)
class Failed:
    index: int
    kind: FailureKind
    reason: str
    search_preview: str
    best_match: MatchCandidate | None = None

    def to_dict(self, preview_chars: int = 80) -> dict[str, Any]:
        best = None
        if self.best_match is not None:
            best = {
                "lineNumber": self.best_match.line_number,
                "similarity": self.best_match.similarity,
                "content": self.best_match.content[:preview_chars],
            }
        return {
            "index": self.index,
            "kind": self.kind.value,
            "reason": self.reason,
            "searchPreview": self.search_preview,
            "bestMatch": best,
        }


BlockOutcome = Union[Applied, Failed]


@dataclass(frozen=True)
class PatchResult:
    content: str
    outcomes: Tuple[BlockOutcome, ...] = ()

    @property
    def applied_count(self) -> int:
        return sum(1 for o in self.outcomes if isinstance(o, Applied))

    @property
    def failed_blocks(self) -> Tuple[Failed, ...]:
        return tuple(o for o in self.outcomes if isinstance(o, Failed))

    @property
    def success(self) -> bool:
        # Partial application still counts; callers decide if that is enough.
        return self.applied_count > 0

    @property
    def status(self) -> str:
        """'applied' (every block), 'partial', or 'failed' (no block)."""
        if not self.success:
            return "failed"
        return "partial" if self.failed_blocks else "applied"

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "content": self.content,
            "appliedCount": self.applied_count,
            "failedBlocks": [f.to_dict() for f in self.failed_blocks],
        }
