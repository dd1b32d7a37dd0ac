import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.markup import escape

from aoc24 import log, output
from aoc24.config import RunOptions
from aoc24.errors import AocError
from aoc24.log import LogLevel
from aoc24.solutions import get_registry

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False, help="Run Advent of Code 2024 solutions.")


def run(options: RunOptions) -> None:
    registry = get_registry(options.inputs_dir)

    if options.day is None:
        if options.input is not None:
            logger.warning("--input is ignored when running every day")
        registry.run_all(options.timing)
        return

    output.console.print(f"[bright_green]Running day[/bright_green] {options.day}")
    path = options.input if options.input is not None else registry.input_path(options.day)
    registry.run_path(options.day, path, options.timing)


@app.command()
def main(
    day: Optional[int] = typer.Argument(None, help="Day to run. If not provided, all days will be run."),
    log_level: LogLevel = typer.Option(LogLevel.WARN, "--log-level", case_sensitive=False, help="Log level"),
    timing: bool = typer.Option(False, "--timing", help="Show timing information"),
    input: Optional[Path] = typer.Option(None, "--input", help="Input file (defaults to inputs/dayN.txt)"),
    inputs_dir: Path = typer.Option(
        Path("inputs"), "--inputs-dir", envvar="AOC_INPUTS_DIR", help="Directory holding the dayN.txt inputs"
    ),
):
    try:
        options = RunOptions(day=day, input=input, timing=timing, log_level=log_level, inputs_dir=inputs_dir)
    except ValidationError as e:
        raise typer.BadParameter(str(e)) from e

    log.configure(options.log_level)
    logger.log(log.TRACE, "Enabled trace logging")
    logger.debug("Enabled debug logging")
    logger.info("Enabled info logging")

    try:
        run(options)
    except AocError as e:
        logger.debug("Run failed", exc_info=True)
        output.errors.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(code=1)
