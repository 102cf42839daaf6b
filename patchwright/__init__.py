from .commit import (
    EditReport,
    PathLocks,
    apply_blocks,
    apply_diff,
    create_file,
    edit_file,
    format_failure_message,
    suggest_next_step,
)
from .errors import EmptyContentError, ParseError, PathViolation, PatchwrightError
from .extract import parse_blocks
from .match import SIMILARITY_THRESHOLD, locate_match, similarity
from .models import (
    Applied,
    BlockOutcome,
    DiffBlock,
    Failed,
    FailureKind,
    MatchCandidate,
    PatchResult,
)
from .utils import LocalFileSystem, MemoryFileSystem, diff_line_stats, normalize

__all__ = [
    "apply_diff",
    "apply_blocks",
    "parse_blocks",
    "locate_match",
    "similarity",
    "normalize",
    "SIMILARITY_THRESHOLD",
    "edit_file",
    "create_file",
    "EditReport",
    "PathLocks",
    "format_failure_message",
    "suggest_next_step",
    "diff_line_stats",
    "LocalFileSystem",
    "MemoryFileSystem",
    "DiffBlock",
    "MatchCandidate",
    "Applied",
    "Failed",
    "FailureKind",
    "BlockOutcome",
    "PatchResult",
    "PatchwrightError",
    "ParseError",
    "EmptyContentError",
    "PathViolation",
]
