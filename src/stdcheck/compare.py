"""Line normalization and comparison of captured output."""

from __future__ import annotations

import re
from typing import Callable, Iterable, Sequence

from stdcheck.capture import read_captured_errors, read_captured_output

Normalizer = Callable[[str], list[str]]

_NEWLINE_RUN = re.compile(r"[\r\n]+")
_TRAILING_PUNCTUATION = (".", "!", "?")


class OutputMismatch(AssertionError):
    """Base class for captured output that differs from the expected text."""


class MismatchError(OutputMismatch):
    def __init__(self, line: int, expected: str, actual: str):
        self.line = line
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected '{expected}' on line {line} but found '{actual}'.")


class ExtraLinesError(OutputMismatch):
    def __init__(self, lines: Sequence[str]):
        self.lines = list(lines)
        super().__init__(_labeled_block("Found unexpected extra lines:", self.lines))


class MissingLinesError(OutputMismatch):
    def __init__(self, lines: Sequence[str]):
        self.lines = list(lines)
        super().__init__(_labeled_block("Missing expected lines:", self.lines))


def _labeled_block(label: str, lines: Sequence[str]) -> str:
    return "\n".join([label, "---", *lines, "---"])


def normalize_lines(text: str) -> list[str]:
    """Split text on newline runs and trim each line.

    A run of newlines counts as a single separator, whatever mix of ``\\n``
    and ``\\r`` it contains. Only the empty fragment after a trailing run is
    dropped: ``"  Hello world  \\n\\n\\n"`` becomes ``["Hello world"]``, while
    ``"\\nHello"`` keeps its empty first line, as does ``" \\nHello"``.
    """
    fragments = _NEWLINE_RUN.split(text)
    if fragments and fragments[-1] == "":
        fragments = fragments[:-1]
    return [fragment.strip() for fragment in fragments]


def normalize_lines_strict(text: str) -> list[str]:
    """Like :func:`normalize_lines`, but case-insensitive and punctuation-tolerant.

    Each line is lowercased and loses one trailing ``.``, ``!`` or ``?``.
    """
    lines = []
    for line in normalize_lines(text):
        line = line.lower()
        if line.endswith(_TRAILING_PUNCTUATION):
            line = line[:-1]
        lines.append(line)
    return lines


def compare_lines(actual: Sequence[str], expected: Sequence[str]) -> None:
    """Raise an :class:`OutputMismatch` unless both line sequences are equal.

    The first differing line is reported and nothing after it is checked.
    Length differences are only reported when the common prefix matches.
    """
    n = min(len(actual), len(expected))
    for i in range(n):
        if actual[i] != expected[i]:
            raise MismatchError(i + 1, expected[i], actual[i])

    if len(actual) > n:
        raise ExtraLinesError(actual[n:])
    if len(expected) > n:
        raise MissingLinesError(expected[n:])


def assert_output(expected: str, *, normalizer: Normalizer = normalize_lines) -> None:
    """Drain captured stdout and compare it against ``expected``."""
    compare_lines(normalizer(read_captured_output()), normalizer(expected))


def assert_error_output(expected: str, *, normalizer: Normalizer = normalize_lines) -> None:
    """Drain captured stderr and compare it against ``expected``."""
    compare_lines(normalizer(read_captured_errors()), normalizer(expected))


def _is_sequence(value) -> bool:
    return isinstance(value, Iterable) and not isinstance(value, (str, bytes))


def assert_equal(actual, expected) -> None:
    if _is_sequence(actual) and _is_sequence(expected):
        equal = list(actual) == list(expected)
    else:
        equal = actual == expected
    if not equal:
        raise AssertionError(f"Expected {expected!r} but found {actual!r}.")
