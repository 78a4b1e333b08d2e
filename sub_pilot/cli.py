"""Command line entry point.

Reads a course file (``input.txt`` by default), folds it through the simple
and aim models and prints one report line per model.
"""

from __future__ import annotations

import click

from sub_pilot.config import DEFAULT_INPUT_PATH, PilotConfig
from sub_pilot.parse import CourseParseError, read_course
from sub_pilot.report import format_report
from sub_pilot.step import run_course
from sub_pilot.utils.logging import configure_logging


def run(config: PilotConfig) -> list[str]:
    """Execute one run and return the report lines in model order."""
    commands = read_course(config.input_path)
    return [format_report(report) for report in run_course(commands, config.models)]


@click.command()
@click.argument(
    "path",
    default=DEFAULT_INPUT_PATH,
    type=click.Path(exists=True, dir_okay=False),
)
@click.option("-v", "--verbose", is_flag=True, help="Debug logging, including every state.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
def main(path: str, verbose: bool, log_json: bool) -> None:
    """Pilot the course in PATH and report distance, depth and product."""
    config = PilotConfig(input_path=path, verbose=verbose, log_json=log_json)
    configure_logging(verbose=config.verbose, log_json=config.log_json)
    try:
        lines = run(config)
    except CourseParseError as e:
        raise click.ClickException(str(e)) from e
    for line in lines:
        click.echo(line)
