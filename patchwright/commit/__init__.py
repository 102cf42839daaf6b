from .core import EditReport, PathLocks, create_file, edit_file
from .patch import apply_blocks, apply_diff
from .report import format_failure_message, suggest_next_step

__all__ = [
    "apply_diff",
    "apply_blocks",
    "edit_file",
    "create_file",
    "EditReport",
    "PathLocks",
    "format_failure_message",
    "suggest_next_step",
]
