"""Programs under test and the default ordered test suite."""

from __future__ import annotations

import sys

from stdcheck.compare import assert_equal, assert_error_output, assert_output
from stdcheck.engine import NamedTest


def print_hello() -> None:
    print("Hello world")


def greet(name: str) -> None:
    print(f"Hello, {name}!")
    print("Welcome aboard.")


def count_down(start: int) -> list[int]:
    seen = []
    for n in range(start, 0, -1):
        print(n)
        seen.append(n)
    print("Liftoff!")
    return seen


def warn(message: str) -> None:
    print(f"warning: {message}", file=sys.stderr)


# --- tests ---


def test_hello_world() -> None:
    print_hello()
    assert_output("Hello world\n")


def test_greeting() -> None:
    greet("Ada")
    assert_output("Hello, Ada!\nWelcome aboard.")


def test_count_down() -> None:
    seen = count_down(3)
    assert_equal(seen, [3, 2, 1])
    assert_output("3\n2\n1\nLiftoff!\n")


def test_warning_goes_to_stderr() -> None:
    warn("disk almost full")
    assert_output("")
    assert_error_output("warning: disk almost full")


DEFAULT_TESTS: list[NamedTest] = [
    ("hello_world", test_hello_world),
    ("greeting", test_greeting),
    ("count_down", test_count_down),
    ("warning_goes_to_stderr", test_warning_goes_to_stderr),
]


def build_suite() -> list[NamedTest]:
    return list(DEFAULT_TESTS)
