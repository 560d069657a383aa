"""Result reporters (JSON and JUnit XML)."""

from stdcheck.reporting.json_report import render_report, write_report
from stdcheck.reporting.junit import write_junit

__all__ = ["render_report", "write_junit", "write_report"]
