# patchwright/commit/core.py
"""
File-level edit tools built on the patch engine.

These are the operations an agent's tool loop calls: read the file, apply
the SEARCH/REPLACE diff, write the result back, and answer with a report
the agent can act on. Edits to the same path are serialized; edits to
different paths run independently.
"""
from __future__ import annotations

import contextlib
import logging
import threading
from dataclasses import dataclass
from typing import Any, Dict, Iterator, Tuple

from ..errors.apply import EmptyContentError
from ..errors.parse import ParseError
from ..errors.path import PathViolation
from ..models.result import Failed
from ..utils.fs import FileSystem, normalize_path
from ..utils.stats import diff_line_stats
from .patch import apply_diff
from .report import format_failure_message, suggest_next_step

__all__ = ["EditReport", "PathLocks", "edit_file", "create_file"]

log = logging.getLogger(__name__)


class PathLocks:
    """
    One lock per workspace path.

    An entry lives only while some caller holds or waits on it, so the
    registry does not grow with every path ever edited.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._locks: Dict[str, threading.Lock] = {}
        self._users: Dict[str, int] = {}

    def active(self) -> int:
        """Number of paths currently held or waited on."""
        with self._lock:
            return len(self._locks)

    @contextlib.contextmanager
    def hold(self, path: str) -> Iterator[None]:
        with self._lock:
            lock = self._locks.setdefault(path, threading.Lock())
            self._users[path] = self._users.get(path, 0) + 1
        try:
            with lock:
                yield
        finally:
            with self._lock:
                self._users[path] -= 1
                if not self._users[path]:
                    del self._users[path]
                    del self._locks[path]


_DEFAULT_LOCKS = PathLocks()


@dataclass
class EditReport:
    """Outcome of one edit tool call."""

    ok: bool
    path: str
    applied: int = 0
    failed: int = 0
    message: str = ""
    failed_blocks: Tuple[Failed, ...] = ()
    suggestion: str = ""
    additions: int = 0
    deletions: int = 0
    written: bool = False

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "ok": self.ok,
            "path": self.path,
            "applied": self.applied,
            "failed": self.failed,
            "message": self.message,
            "additions": self.additions,
            "deletions": self.deletions,
        }
        if self.failed_blocks:
            out["failedBlocks"] = [fb.to_dict() for fb in self.failed_blocks]
        if self.suggestion:
            out["suggestion"] = self.suggestion
        return out


def edit_file(
    fs: FileSystem,
    path: str,
    diff_text: str,
    *,
    dry_run: bool = False,
    locks: PathLocks | None = None,
    logger: logging.Logger | None = None,
    log: bool = False,
) -> EditReport:
    """
    Apply SEARCH/REPLACE `diff_text` to the file at `path`.

    The file is written only when at least one block applied (and not in
    dry-run mode). Missing or empty files are refused: use create_file.
    Errors from the storage adapter other than a missing file propagate.
    """
    try:
        rel = normalize_path(path)
    except PathViolation as e:
        return _refuse(path, str(e))

    with (_DEFAULT_LOCKS if locks is None else locks).hold(rel):
        try:
            original = fs.read_file(rel)
        except FileNotFoundError:
            return _refuse(rel, f"File {rel} does not exist. Use create_file to create it with its full content.")
        except PathViolation as e:
            return _refuse(rel, str(e))

        try:
            result = apply_diff(original, diff_text, logger=logger, log=log)
        except EmptyContentError:
            return _refuse(rel, f"File {rel} is empty. Use create_file to write its full content.")
        except ParseError as e:
            return _refuse(rel, str(e))

        if not result.success:
            return EditReport(
                ok=False,
                path=rel,
                failed=len(result.failed_blocks),
                message=format_failure_message(result, rel),
                failed_blocks=result.failed_blocks,
                suggestion=suggest_next_step(result),
            )

        additions, deletions = diff_line_stats(original, result.content)
        if not dry_run:
            fs.write_file(rel, result.content)

    total = len(result.outcomes)
    if result.status == "applied":
        message = f"Successfully applied {result.applied_count} change(s) to {rel}."
    else:
        message = (
            f"Applied {result.applied_count}/{total} changes to {rel}. "
            f"{len(result.failed_blocks)} block(s) failed - re-read the file to check current content."
        )
    if dry_run:
        message = "DRY RUN: " + message

    return EditReport(
        ok=True,
        path=rel,
        applied=result.applied_count,
        failed=len(result.failed_blocks),
        message=message,
        failed_blocks=result.failed_blocks,
        suggestion=suggest_next_step(result),
        additions=additions,
        deletions=deletions,
        written=not dry_run,
    )


def create_file(
    fs: FileSystem,
    path: str,
    content: str,
    *,
    locks: PathLocks | None = None,
) -> EditReport:
    """Write a new file with its full content. Refuses to clobber a non-empty file."""
    try:
        rel = normalize_path(path)
    except PathViolation as e:
        return _refuse(path, str(e))

    with (_DEFAULT_LOCKS if locks is None else locks).hold(rel):
        try:
            if fs.exists(rel) and fs.read_file(rel):
                return _refuse(rel, f"File {rel} already exists. Use edit_file to change it.")
            fs.write_file(rel, content)
        except PathViolation as e:
            return _refuse(rel, str(e))

    additions, _ = diff_line_stats("", content)
    return EditReport(ok=True, path=rel, message=f"Created file {rel}", additions=additions, written=True)


def _refuse(path: str, message: str) -> EditReport:
    log.warning("edit refused for %s: %s", path, message)
    return EditReport(ok=False, path=path, message=message)
