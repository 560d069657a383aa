from __future__ import annotations

from pathlib import Path
from typing import Iterable

from junitparser import Failure, JUnitXml, TestCase, TestSuite

from stdcheck.verdict import TestVerdict


def _first_line(message: str) -> str:
    return message.splitlines()[0] if message else ""


def write_junit(
    path: Path, verdicts: Iterable[TestVerdict], suite_name: str = "stdcheck"
) -> Path:
    """Write a JUnit XML file with one test case per verdict, return its path."""
    xml = JUnitXml()
    suite = TestSuite(suite_name)

    for verdict in verdicts:
        case = TestCase(verdict.name)
        case.classname = suite_name
        if not verdict.passed:
            failure = Failure(_first_line(verdict.message))
            failure.text = verdict.message
            case.result = [failure]
        suite.add_testcase(case)

    xml.append(suite)

    path.parent.mkdir(parents=True, exist_ok=True)
    xml.write(str(path), pretty=True)
    return path
