# patchwright/utils/protect.py
from typing import Iterable

import pathspec

__all__ = ["DEFAULT_PROTECTED_PATTERNS", "compile_protected", "is_protected"]

# Never edited through the patch tools, whatever the caller asks.
DEFAULT_PROTECTED_PATTERNS = (".git/", "node_modules/")


def compile_protected(patterns: Iterable[str] = DEFAULT_PROTECTED_PATTERNS) -> pathspec.PathSpec:
    """Compile gitignore-style patterns; blank lines and '#' comments are ignored."""
    return pathspec.GitIgnoreSpec.from_lines(list(patterns))


def is_protected(spec: pathspec.PathSpec, rel_path: str) -> bool:
    """True if the workspace-relative POSIX path falls under a protected pattern."""
    return spec.match_file(rel_path)
