# patchwright/utils/fs.py
"""
Storage adapters for the file edit layer.

The patch engine itself never touches storage; these adapters give
`edit_file` / `create_file` the two operations they need (plus `exists`)
over a workspace of repository-relative POSIX paths.
"""
from __future__ import annotations

import contextlib
import os
import posixpath
import tempfile
from typing import Dict, Iterable, Protocol

from ..errors.path import PathViolation
from .protect import DEFAULT_PROTECTED_PATTERNS, compile_protected, is_protected

__all__ = ["FileSystem", "LocalFileSystem", "MemoryFileSystem", "normalize_path"]


class FileSystem(Protocol):
    def read_file(self, path: str) -> str: ...

    def write_file(self, path: str, content: str) -> None: ...

    def exists(self, path: str) -> bool: ...


def normalize_path(path: str) -> str:
    """
    Canonical workspace-relative form of `path`: forward slashes, no leading
    slash, no '.' or duplicate separators.

    Raises PathViolation for empty paths and paths that climb out with '..'.
    """
    p = (path or "").strip().replace("\\", "/").lstrip("/")
    p = posixpath.normpath(p) if p else ""
    if p in ("", "."):
        raise PathViolation(f"Invalid file path: '{path}'")
    if p == ".." or p.startswith("../"):
        raise PathViolation(f"Path traversal attempt detected for '{path}'")
    return p


class _ProtectedMixin:
    def _init_protection(self, protected: Iterable[str]) -> None:
        self._protected = compile_protected(protected)

    def _checked(self, path: str) -> str:
        rel = normalize_path(path)
        if is_protected(self._protected, rel):
            raise PathViolation(f"Path '{rel}' is protected and cannot be edited")
        return rel


class LocalFileSystem(_ProtectedMixin):
    """
    Files under `base_path` on disk.

    Text is read and written as UTF-8 with newline translation disabled, so
    CRLF files round-trip unchanged. Writes go to a temp file in the target
    directory and are promoted with os.replace().
    """

    def __init__(
        self,
        base_path: str,
        *,
        protected: Iterable[str] = DEFAULT_PROTECTED_PATTERNS,
        backup_ext: str | None = None,
    ) -> None:
        self.base_real = os.path.realpath(base_path)
        self.backup_ext = backup_ext
        self._init_protection(protected)

    def resolve(self, path: str) -> str:
        """Absolute path for `path`, enforcing containment and protection."""
        rel = self._checked(path)
        target = os.path.join(self.base_real, *rel.split("/"))
        # realpath follows symlinks that might point outside the workspace.
        resolved = os.path.realpath(target)
        if os.path.commonpath([self.base_real, resolved]) != self.base_real:
            raise PathViolation(f"Path traversal attempt detected for '{path}'")
        return resolved

    def exists(self, path: str) -> bool:
        return os.path.isfile(self.resolve(path))

    def read_file(self, path: str) -> str:
        with open(self.resolve(path), "r", encoding="utf-8", newline="") as f:
            return f.read()

    def write_file(self, path: str, content: str) -> None:
        dest = self.resolve(path)
        dirpath = os.path.dirname(dest)
        os.makedirs(dirpath, exist_ok=True)

        if self.backup_ext and os.path.isfile(dest):
            ext = self.backup_ext if self.backup_ext.startswith(".") else "." + self.backup_ext
            with open(dest, "r", encoding="utf-8", newline="") as src, open(
                dest + ext, "w", encoding="utf-8", newline=""
            ) as bak:
                bak.write(src.read())

        fd, tmp = tempfile.mkstemp(prefix=".pw-", suffix=".tmp", dir=dirpath)
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
                f.write(content)
            os.replace(tmp, dest)
        except BaseException:
            with contextlib.suppress(OSError):
                os.remove(tmp)
            raise


class MemoryFileSystem(_ProtectedMixin):
    """Dict-backed workspace, for tests and for embedding the tools in-process."""

    def __init__(
        self,
        files: Dict[str, str] | None = None,
        *,
        protected: Iterable[str] = DEFAULT_PROTECTED_PATTERNS,
    ) -> None:
        self._init_protection(protected)
        self.files: Dict[str, str] = {normalize_path(k): v for k, v in (files or {}).items()}

    def exists(self, path: str) -> bool:
        return self._checked(path) in self.files

    def read_file(self, path: str) -> str:
        rel = self._checked(path)
        try:
            return self.files[rel]
        except KeyError:
            raise FileNotFoundError(f"No such file: '{rel}'") from None

    def write_file(self, path: str, content: str) -> None:
        self.files[self._checked(path)] = content
