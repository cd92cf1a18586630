"""Run a command once and display its result using the 4-stage pattern."""

from collections.abc import Callable
from typing import Any

import typer

from sbsdiff.api.StageResult import StageResult

from .display.CLIDisplay import CLIDisplay


def _run_single_execution(
    func: Callable[..., StageResult],
    args: tuple,
    kwargs: dict,
    display: CLIDisplay,
    display_format: str,
    result_printer: Callable[[dict], None] | None = None,
) -> None:
    """Run command once and display result.

    Stage 1 announces before any work runs, stage 2 reports each progress
    step, stage 3 prints the result message, stage 4 prints the output.
    """
    result = func(*args, **kwargs)

    # Stage 1: Announce
    display.status(result.announce)

    # Stage 2: Progress
    for progress_percent, message in result.progress_callback(result):
        display.info(f"Progress: {message} ({progress_percent:.0%})")

    if not result.result:
        raise ValueError("progress_callback must set result.result to a non-empty string")
    if not result.output:
        raise ValueError("progress_callback must set result.output to a non-empty dict")

    # Stage 3: Result
    if result.success:
        display.success(result.result)
    else:
        display.error(result.result)

    # Stage 4: Output
    output: Any = result.output
    if result_printer:
        result_printer(output)
    else:
        display.json_output(output, format="json" if display_format == "json" else "yaml")

    raise typer.Exit(0 if result.success else 1)
