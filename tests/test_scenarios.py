"""End-to-end behaviour of apply_diff on the agent-facing examples."""
import pytest

from patchwright import SIMILARITY_THRESHOLD, apply_diff
from patchwright.errors import ParseError
from patchwright.models import FailureKind


def test_exact_replacement(app_content, make_diff):
    result = apply_diff(app_content, make_diff(("Hello world", "Hello Botflow!")))
    assert result.applied_count == 1
    assert result.failed_blocks == ()
    assert "Hello Botflow!" in result.content
    assert result.outcomes[0].candidate.similarity == 1.0


def test_typo_in_search_is_matched_fuzzily(app_content, make_diff):
    result = apply_diff(app_content, make_diff(("Helllo world", "Hello Botflow!")))
    assert result.applied_count == 1
    candidate = result.outcomes[0].candidate
    assert candidate.similarity == pytest.approx(1 - 1 / 12)
    assert candidate.line_number == 2
    assert result.content == "function App() {\n  return <h1>Hello Botflow!</h1>\n}"


def test_unrelated_search_fails_with_best_match(app_content, make_diff):
    result = apply_diff(app_content, make_diff(("Goodbye world", "Hello Botflow!")))
    assert result.applied_count == 0
    [failed] = result.failed_blocks
    assert failed.kind is FailureKind.BELOW_THRESHOLD
    assert failed.best_match.line_number == 2
    assert failed.best_match.similarity < SIMILARITY_THRESHOLD
    assert result.content == app_content


def test_second_block_depends_on_first(app_content, make_diff):
    diff = make_diff(
        ("Hello world", "Hello Botflow!"),
        ("<h1>Hello Botflow!</h1>", "<h2>Hello Botflow!</h2>"),
    )
    result = apply_diff(app_content, diff)
    assert result.applied_count == 2
    assert "<h2>Hello Botflow!</h2>" in result.content


def test_diff_without_markers_is_a_parse_error(app_content):
    with pytest.raises(ParseError):
        apply_diff(app_content, "")


def test_whitespace_search_is_a_parse_error(app_content, make_diff):
    with pytest.raises(ParseError):
        apply_diff(app_content, make_diff(("  \n  ", "anything")))


def test_exact_match_prefers_first_occurrence(make_diff):
    result = apply_diff("dup\nmid\ndup\n", make_diff(("dup", "first")))
    assert result.content == "first\nmid\ndup\n"


@pytest.mark.parametrize(
    "pairs",
    [
        [("Hello world", "Hi")],
        [("nope nope nope", "x"), ("return", "yield")],
        [("zzzzzzzz", "1"), ("qqqqqqqq", "2"), ("}", "};")],
    ],
)
def test_every_parsed_block_is_accounted_for(app_content, make_diff, pairs):
    result = apply_diff(app_content, make_diff(*pairs))
    assert result.applied_count + len(result.failed_blocks) == len(pairs)


def test_rejected_block_does_not_change_the_buffer(app_content, make_diff):
    result = apply_diff(app_content, make_diff(("Hello world", "Hi"), ("Goodbye world", "x")))
    alone = apply_diff(app_content, make_diff(("Hello world", "Hi")))
    assert result.content == alone.content


def test_applying_the_same_diff_is_deterministic(app_content, make_diff):
    diff = make_diff(("Helllo world", "Hi"), ("Goodbye", "x"))
    assert apply_diff(app_content, diff) == apply_diff(app_content, diff)


def test_search_with_trailing_blanks_replaces_the_whole_line(make_diff):
    result = apply_diff("a = 1  \nb = 2\n", make_diff(("a = 1  ", "a = 9")))
    assert result.applied_count == 1
    assert result.content == "a = 9\nb = 2\n"
