"""StageResult dataclass for the 4-stage command pattern."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field


@dataclass
class StageResult:
    """Result of a command: announce, progress, result message, output.

    ``progress_callback`` is a generator that yields ``(fraction, message)``
    tuples and fills ``result``, ``output`` and ``success`` on the same object.
    """

    announce: str
    progress_callback: Callable[["StageResult"], Iterator[tuple[float, str]]]
    result: str = ""
    output: dict = field(default_factory=dict)
    success: bool = False
