"""Decorator to handle StageResult for CLI display."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import TypeVar

from ._run_single_execution import _run_single_execution
from .display.CLIDisplay import CLIDisplay

F = TypeVar("F", bound=Callable)


def _handle_stage_result(
    func: F, display_format: str = "table", result_printer: Callable[[dict], None] | None = None
) -> F:
    """Wrap a command function to handle StageResult for CLI display.

    1. Announce (stderr)
    2. Progress (stderr)
    3. Result (stderr)
    4. Output (stdout, via ``result_printer`` or as JSON/YAML)

    Args:
        func: Function that returns StageResult
        display_format: "table", "json" or "yaml", as read from the command context
        result_printer: Optional printer for the output dict

    Returns:
        Wrapped function that displays the stages and exits with the result code
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        display = CLIDisplay()
        _run_single_execution(func, args, kwargs, display, display_format, result_printer)

    return wrapper  # type: ignore[return-value]
