"""
Opt-in debug logging for the patch engine.

The engine entry points (``parse_blocks``, ``locate_match``, ``apply_blocks``
and ``apply_diff``) accept ``logger=None, log=False`` and pass both down, so
one flag traces a whole call:

    apply_diff(content, diff_text, log=True)

records, at DEBUG, which blocks the parser dropped (``patchwright.extract.blocks``),
the stage and similarity of every match (``patchwright.match.locator``) and the
offsets each block was written at (``patchwright.commit.patch``). Passing a
logger sends all of it there instead. With neither, calls go to a
:class:`NoopLogger` and the global logging setup is never touched.
"""
from __future__ import annotations

import logging


class NoopLogger:
    """Accepts the logging.Logger call surface and drops every record."""

    def debug(self, *args, **kwargs):  # type: ignore[no-untyped-def]
        pass

    info = warning = error = exception = critical = debug


def resolve_logger(
    logger: logging.Logger | None = None,
    *,
    enabled: bool = False,
    name: str | None = None,
    level: int = logging.DEBUG,
) -> logging.Logger | NoopLogger:
    """
    Logger for one engine call.

    A caller-supplied `logger` is used as is. With `enabled`, the module's
    logger under ``patchwright`` is returned at `level` (DEBUG, since every
    engine record is a debug trace) and left propagating to the root, where
    application handlers and pytest's caplog pick it up.
    """
    if logger is not None:
        return logger
    if not enabled:
        return NoopLogger()
    lg = logging.getLogger(name or "patchwright")
    lg.setLevel(level)
    lg.propagate = True
    return lg
