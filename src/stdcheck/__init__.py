"""Capture-and-compare test runner for small console programs."""

from stdcheck.capture import StreamCapture, read_captured_errors, read_captured_output
from stdcheck.compare import (
    ExtraLinesError,
    MismatchError,
    MissingLinesError,
    OutputMismatch,
    assert_equal,
    assert_error_output,
    assert_output,
    compare_lines,
    normalize_lines,
    normalize_lines_strict,
)
from stdcheck.engine import run_test, run_tests
from stdcheck.verdict import TestVerdict

__all__ = [
    "ExtraLinesError",
    "MismatchError",
    "MissingLinesError",
    "OutputMismatch",
    "StreamCapture",
    "TestVerdict",
    "assert_equal",
    "assert_error_output",
    "assert_output",
    "compare_lines",
    "normalize_lines",
    "normalize_lines_strict",
    "read_captured_errors",
    "read_captured_output",
    "run_test",
    "run_tests",
]
