from __future__ import annotations

import typer

app = typer.Typer(
    name="stdcheck", help="Run output-comparison tests and report results as JSON"
)


@app.command(context_settings={"ignore_unknown_options": True})
def run(
    args: list[str] | None = typer.Argument(
        None, help="[exercise] [destfile]", show_default=False
    ),
    junit: str | None = typer.Option(None, help="Also write a JUnit XML report"),
    log_file: str | None = typer.Option(None, help="Write debug log to this file"),
    indent: int = typer.Option(4, min=0, max=16, help="JSON indentation width"),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output to terminal"
    ),
):
    """Run the built-in test suite and report a JSON array of verdicts."""
    from pydantic import ValidationError

    from stdcheck.config import USAGE, RunConfig, UsageError
    from stdcheck.engine import run_tests
    from stdcheck.reporting.json_report import render_report, write_report
    from stdcheck.reporting.junit import write_junit
    from stdcheck.suite import build_suite
    from stdcheck.verbose import setup_logger

    try:
        config = RunConfig.from_args(
            args, junit=junit, log_file=log_file, indent=indent, verbose=verbose
        )
    except (UsageError, ValidationError):
        typer.echo(USAGE)
        raise typer.Exit(1)

    logger = setup_logger(
        config.log_file, verbose=config.verbose, logger_name="stdcheck_main"
    )
    if config.exercise:
        logger.debug(f"Exercise: {config.exercise}")

    verdicts = run_tests(build_suite(), logger=logger)

    if config.destination is not None:
        if write_report(config.destination, verdicts, logger, indent=config.indent):
            typer.echo(f"Results written to {config.destination}")
    else:
        typer.echo(render_report(verdicts, indent=config.indent))

    if config.junit is not None:
        try:
            junit_path = write_junit(config.junit, verdicts)
        except OSError as e:
            logger.error(f"Failed to write JUnit report to {config.junit}: {e}")
            typer.echo(f"Error: could not write JUnit report: {e}", err=True)
        else:
            logger.debug(f"Wrote JUnit report to {junit_path}")
