from patchwright.commit.report import (
    build_failure,
    format_failure_message,
    search_preview,
    suggest_next_step,
)
from patchwright.models import DiffBlock, Failed, FailureKind, MatchCandidate, PatchResult


def _candidate(similarity, content="x", line=3):
    return MatchCandidate(0, len(content), similarity, line, content)


def test_search_preview_uses_first_non_blank_line():
    assert search_preview("\n  \n   first real line\nsecond") == "   first real line"
    assert search_preview("\n\n") == ""


def test_search_preview_is_clipped():
    preview = search_preview("x" * 100)
    assert preview == "x" * 80 + "..."


def test_build_failure_without_candidate_is_no_match():
    failed = build_failure(DiffBlock(2, "needle", ""), None)
    assert failed.kind is FailureKind.NO_MATCH
    assert failed.reason == "no similar content found"
    assert failed.best_match is None
    assert failed.index == 2


def test_build_failure_zero_similarity_is_no_match_but_keeps_candidate():
    best = _candidate(0.0, content="unrelated", line=4)
    failed = build_failure(DiffBlock(0, "needle", ""), best)
    assert failed.kind is FailureKind.NO_MATCH
    assert failed.reason == "no similar content found"
    assert failed.best_match is best
    assert failed.to_dict()["bestMatch"]["lineNumber"] == 4

    message = format_failure_message(PatchResult("c", (failed,)), "a.txt")
    assert "Best match found" not in message


def test_build_failure_below_threshold_reports_percentage():
    best = _candidate(0.8)
    failed = build_failure(DiffBlock(0, "needle", ""), best)
    assert failed.kind is FailureKind.BELOW_THRESHOLD
    assert failed.reason == "best match below threshold (80%)"
    assert failed.best_match is best


def test_failure_message_lists_each_block():
    best = _candidate(0.734, content="line one\nline two", line=7)
    result = PatchResult(
        "c",
        (
            Failed(0, FailureKind.BELOW_THRESHOLD, "best match below threshold (73%)", "line one", best),
            Failed(1, FailureKind.NO_MATCH, "no similar content found", "zzz"),
        ),
    )
    message = format_failure_message(result, "src/a.ts")
    lines = message.split("\n")
    assert lines[0] == "Failed to apply 2 diff block(s) to src/a.ts."
    assert "[Block 1] best match below threshold (73%)" in lines
    assert "  Best match found at line 7 (73% similar):" in lines
    assert '  File content: "line one\\nline two"' in lines
    assert '  Searched for: "line one"' in lines
    assert "[Block 2] no similar content found" in lines
    assert '  Searched for: "zzz"' in lines


def test_failure_message_empty_when_nothing_failed():
    assert format_failure_message(PatchResult("c"), "a") == ""


def test_suggestion_for_changed_file():
    result = PatchResult("c", (Failed(0, FailureKind.BELOW_THRESHOLD, "r", "foo()", _candidate(0.7)),))
    assert suggest_next_step(result).startswith("The file content has changed since it was last read.")


def test_suggestion_for_unrelated_content():
    result = PatchResult("c", (Failed(0, FailureKind.BELOW_THRESHOLD, "r", "foo()", _candidate(0.3)),))
    assert suggest_next_step(result).startswith("No similar content was found.")


def test_indentation_hint():
    result = PatchResult("c", (Failed(0, FailureKind.NO_MATCH, "r", "    indented()"),))
    assert "indentation" in suggest_next_step(result)
    result = PatchResult("c", (Failed(0, FailureKind.NO_MATCH, "r", "flat()"),))
    assert "indentation" not in suggest_next_step(result)


def test_no_suggestion_when_everything_applied():
    assert suggest_next_step(PatchResult("c")) == ""
