from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable

import typer
from pydantic import BaseModel, ConfigDict, Field, field_validator

from stdcheck.verdict import TestVerdict


class ReportEntry(BaseModel):
    """One object of the JSON report: ``{"name", "pass", "reason"}``."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)
    name: str = ""
    passed: bool = Field(alias="pass")
    reason: str = ""

    @field_validator("name", "reason", mode="before")
    @classmethod
    def none_as_empty(cls, v: str | None) -> str:
        return "" if v is None else v

    @classmethod
    def from_verdict(cls, verdict: TestVerdict) -> "ReportEntry":
        return cls(name=verdict.name, passed=verdict.passed, reason=verdict.message)


def render_report(verdicts: Iterable[TestVerdict], indent: int = 4) -> str:
    """Serialize verdicts, in order, as a JSON array string.

    The JSON encoder escapes backslashes, quotes, newlines and carriage
    returns in every string, so the result is always parseable.
    """
    entries = [
        ReportEntry.from_verdict(v).model_dump(by_alias=True) for v in verdicts
    ]
    return json.dumps(entries, indent=indent, ensure_ascii=False)


def write_report(
    path: Path,
    verdicts: Iterable[TestVerdict],
    logger: logging.Logger,
    indent: int = 4,
) -> bool:
    """Write the JSON report to ``path``. Returns False if the write failed.

    A failed write is reported on stderr and in the log but never raised.
    """
    content = render_report(verdicts, indent=indent)
    try:
        path.write_text(content + "\n", encoding="utf-8")
    except OSError as e:
        logger.error(f"Failed to write results to {path}: {e}")
        typer.echo(f"Error: could not write results to {path}: {e}", err=True)
        return False
    logger.debug(f"Wrote JSON report to {path}")
    return True
