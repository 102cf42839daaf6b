import logging

from patchwright import apply_diff
from patchwright._logging import NoopLogger, resolve_logger


def test_resolve_logger_default_noop():
    lg = resolve_logger()
    assert isinstance(lg, NoopLogger)
    # Should not raise:
    lg.debug("hello %s", "x")
    lg.warning("world")


def test_resolve_logger_enabled_creates_named_logger(caplog):
    with caplog.at_level(logging.DEBUG):
        lg = resolve_logger(enabled=True, name="patchwright.test")
        lg.debug("test message")
    assert any("test message" in rec.getMessage() for rec in caplog.records)


def test_resolve_logger_prefers_passed_logger():
    custom = logging.getLogger("custom.patch")
    assert resolve_logger(logger=custom, enabled=False) is custom


def test_apply_diff_is_silent_by_default(caplog, app_content, make_diff):
    with caplog.at_level(logging.DEBUG):
        apply_diff(app_content, make_diff(("Hello world", "Hi")))
    assert not [r for r in caplog.records if r.name.startswith("patchwright")]


def test_apply_diff_logs_block_decisions_when_enabled(caplog, app_content, make_diff):
    with caplog.at_level(logging.DEBUG, logger="patchwright"):
        apply_diff(app_content, make_diff(("Hello world", "Hi")), log=True)
    messages = [r.getMessage() for r in caplog.records]
    assert any("block 1 applied" in m for m in messages)
    assert any("exact match at line 2" in m for m in messages)


def test_one_flag_traces_parser_locator_and_applier(caplog, app_content, make_diff):
    diff = "<<<<<<< SEARCH\nbroken\n" + make_diff(("Hello world", "Hi"))
    with caplog.at_level(logging.DEBUG, logger="patchwright"):
        apply_diff(app_content, diff, log=True)
    names = {r.name for r in caplog.records}
    assert {"patchwright.extract.blocks", "patchwright.match.locator", "patchwright.commit.patch"} <= names
    assert any("dropping it" in r.getMessage() for r in caplog.records if r.name == "patchwright.extract.blocks")
