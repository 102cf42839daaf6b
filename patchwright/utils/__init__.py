# patchwright/utils/__init__.py
from .fs import FileSystem, LocalFileSystem, MemoryFileSystem, normalize_path
from .protect import DEFAULT_PROTECTED_PATTERNS
from .stats import diff_line_stats
from .text import NormalizedText, detect_eol, normalize, normalize_text

__all__ = [
    "FileSystem",
    "LocalFileSystem",
    "MemoryFileSystem",
    "normalize_path",
    "DEFAULT_PROTECTED_PATTERNS",
    "diff_line_stats",
    "NormalizedText",
    "normalize",
    "normalize_text",
    "detect_eol",
]
