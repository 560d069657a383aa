from __future__ import annotations

import logging
import traceback
from typing import Callable, Iterable

from stdcheck.capture import StreamCapture
from stdcheck.verdict import TestVerdict

TestBody = Callable[[], object]
NamedTest = tuple[str, TestBody]

_default_logger = logging.getLogger("stdcheck")


def describe_failure(exc: BaseException) -> str:
    """Render an exception as ``Type: message`` plus one line per stack frame.

    Chained exceptions are appended under ``Caused by:`` headers.
    """
    lines: list[str] = []
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        if lines:
            lines.append("Caused by:")
        lines.append(f"{type(current).__name__}: {current}")
        for frame in traceback.extract_tb(current.__traceback__):
            lines.append(f"  at {frame.name} ({frame.filename}:{frame.lineno})")
        if current.__cause__ is not None:
            current = current.__cause__
        elif not current.__suppress_context__:
            current = current.__context__
        else:
            current = None
    return "\n".join(lines)


def run_test(
    name: str, body: TestBody, logger: logging.Logger | None = None
) -> TestVerdict:
    """Run one test body with its output captured and return its verdict.

    Exceptions raised by the body become a failing verdict; they are never
    propagated. stdout and stderr are restored before this returns.
    """
    if not name:
        raise ValueError("Test name must be a non-empty string")
    logger = logger or _default_logger

    logger.debug(f"Running test '{name}'")
    failure: BaseException | None = None
    with StreamCapture() as capture:
        try:
            body()
        except (Exception, SystemExit) as e:
            failure = e
        finally:
            leftover_out = capture.read_stdout()
            leftover_err = capture.read_stderr()

    if leftover_out:
        logger.debug(f"Unread stdout from '{name}': {leftover_out!r}")
    if leftover_err:
        logger.debug(f"Unread stderr from '{name}': {leftover_err!r}")

    if failure is None:
        return TestVerdict(name=name, passed=True, message="")

    logger.debug(f"Test '{name}' raised {type(failure).__name__}: {failure}")
    return TestVerdict(name=name, passed=False, message=describe_failure(failure))


def run_tests(
    tests: Iterable[NamedTest], logger: logging.Logger | None = None
) -> list[TestVerdict]:
    """Run tests one at a time, in order, returning their verdicts in the same order."""
    logger = logger or _default_logger
    verdicts: list[TestVerdict] = []
    for name, body in tests:
        verdict = run_test(name, body, logger=logger)
        status = "PASS" if verdict.passed else "FAIL"
        logger.info(f"{status}  {name}")
        verdicts.append(verdict)

    n_passed = sum(1 for v in verdicts if v.passed)
    logger.debug(f"{n_passed}/{len(verdicts)} tests passed")
    return verdicts
