"""Result of a single test execution."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class TestVerdict:
    """Outcome of running one named test.

    Attributes:
        name: Identifier assigned by the caller (e.g. "hello_world").
        passed: Whether the test body completed without raising.
        message: Empty when passed. Otherwise the failure description
            followed by a rendering of the stack at the point of failure.
    """

    __test__ = False  # not a pytest test class

    name: str
    passed: bool
    message: str = ""

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
