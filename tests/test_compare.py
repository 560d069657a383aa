"""Tests for line normalization and output comparison."""

import pytest

from stdcheck.compare import (
    ExtraLinesError,
    MismatchError,
    MissingLinesError,
    OutputMismatch,
    assert_equal,
    compare_lines,
    normalize_lines,
    normalize_lines_strict,
)


# --- normalize_lines ---


def test_normalize_trims_and_collapses_trailing_newlines():
    assert normalize_lines("  Hello world  \n\n\n") == ["Hello world"]


def test_normalize_mixed_line_endings():
    assert normalize_lines("one\r\ntwo\rthree\nfour") == ["one", "two", "three", "four"]


def test_normalize_newline_run_is_single_separator():
    assert normalize_lines("a\n\n\nb") == ["a", "b"]


def test_normalize_keeps_whitespace_only_lines_as_empty():
    assert normalize_lines("a\n   \nb") == ["a", "", "b"]


def test_normalize_keeps_case_and_punctuation():
    assert normalize_lines("Hello World!\nBye.") == ["Hello World!", "Bye."]


def test_normalize_empty_text():
    assert normalize_lines("") == []
    assert normalize_lines("\n\n") == [""]


def test_normalize_leading_newlines_keep_empty_first_line():
    assert normalize_lines("\n\nfirst\n") == ["", "first"]
    assert normalize_lines("\nHello") == ["", "Hello"]
    assert normalize_lines("\nHello") == normalize_lines(" \nHello")


# --- normalize_lines_strict ---


def test_strict_lowercases_and_strips_one_punctuation_mark():
    assert normalize_lines_strict("Hello World!\nReally?!\nDone.") == [
        "hello world",
        "really?",
        "done",
    ]


def test_strict_leaves_other_trailing_characters():
    assert normalize_lines_strict("  Count: 3,  ") == ["count: 3,"]


# --- compare_lines ---


def test_equal_sequences_pass():
    compare_lines(["a", "b"], ["a", "b"])
    compare_lines([], [])


def test_mismatch_message():
    with pytest.raises(MismatchError) as exc_info:
        compare_lines(["Goodbye"], ["Hello world"])
    assert str(exc_info.value) == "Expected 'Hello world' on line 1 but found 'Goodbye'."
    assert exc_info.value.line == 1


def test_mismatch_reports_first_differing_line_only():
    with pytest.raises(MismatchError) as exc_info:
        compare_lines(["a", "x", "y"], ["a", "b", "c"])
    assert exc_info.value.line == 2
    assert exc_info.value.expected == "b"
    assert exc_info.value.actual == "x"
    assert "line 3" not in str(exc_info.value)


def test_content_mismatch_wins_over_length_difference():
    with pytest.raises(MismatchError):
        compare_lines(["a", "x", "extra", "more"], ["a", "b"])
    with pytest.raises(MismatchError):
        compare_lines(["x"], ["a", "b", "c"])


def test_extra_lines_listed_in_order():
    with pytest.raises(ExtraLinesError) as exc_info:
        compare_lines(["a", "b", "c", "d"], ["a", "b"])
    assert exc_info.value.lines == ["c", "d"]
    message = str(exc_info.value)
    assert message.splitlines() == ["Found unexpected extra lines:", "---", "c", "d", "---"]


def test_missing_lines_listed_in_order():
    with pytest.raises(MissingLinesError) as exc_info:
        compare_lines(["a"], ["a", "b", "c"])
    assert exc_info.value.lines == ["b", "c"]
    message = str(exc_info.value)
    assert message.splitlines() == ["Missing expected lines:", "---", "b", "c", "---"]


def test_everything_missing_when_no_output():
    with pytest.raises(MissingLinesError) as exc_info:
        compare_lines([], ["Hello world"])
    assert exc_info.value.lines == ["Hello world"]


def test_comparison_errors_are_assertion_errors():
    for error in (MismatchError(1, "a", "b"), ExtraLinesError(["x"]), MissingLinesError(["y"])):
        assert isinstance(error, OutputMismatch)
        assert isinstance(error, AssertionError)


# --- assert_equal ---


def test_assert_equal_sequences():
    assert_equal([1, 2, 3], [1, 2, 3])
    assert_equal((1, 2), [1, 2])
    assert_equal("abc", "abc")


def test_assert_equal_reports_both_values():
    with pytest.raises(AssertionError, match=r"Expected \[1, 2\] but found \[2, 1\]"):
        assert_equal([2, 1], [1, 2])


def test_assert_equal_string_vs_list_differs():
    with pytest.raises(AssertionError):
        assert_equal("ab", ["a", "b"])


def test_assert_equal_scalars():
    assert_equal(3, 3)
    assert_equal(None, None)
    with pytest.raises(AssertionError, match="Expected 4 but found 3."):
        assert_equal(3, 4)
