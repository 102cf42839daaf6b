from .blocks import DiffBlock, MatchCandidate
from .result import Applied, BlockOutcome, Failed, FailureKind, PatchResult

__all__ = [
    "DiffBlock",
    "MatchCandidate",
    "Applied",
    "Failed",
    "FailureKind",
    "BlockOutcome",
    "PatchResult",
]
