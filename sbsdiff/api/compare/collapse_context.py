"""Collapse long unchanged runs for display."""

from dataclasses import dataclass

from .ChangeType import ChangeType
from .DiffModel import DiffModel


@dataclass(frozen=True)
class Hunk:
    """Half-open row range ``[start, stop)`` kept visible."""

    start: int
    stop: int


def collapse_context(model: DiffModel, context_lines: int) -> tuple[Hunk, ...]:
    """Find the row ranges to show when unchanged runs are collapsed.

    Each changed row is kept with up to ``context_lines`` rows on either side;
    ranges that overlap or touch are merged.

    Args:
        model: Comparison result
        context_lines: Unchanged rows to keep around each change (>= 0)

    Returns:
        Hunks in row order; empty when nothing changed

    Raises:
        ValueError: If context_lines is negative
    """
    if context_lines < 0:
        raise ValueError(f"context_lines must be >= 0 (found: {context_lines})")

    hunks: list[Hunk] = []
    total = len(model)

    for i, old in enumerate(model.old_side):
        if old.change_type is ChangeType.UNCHANGED:
            continue
        start = max(0, i - context_lines)
        stop = min(total, i + context_lines + 1)
        if hunks and start <= hunks[-1].stop:
            hunks[-1] = Hunk(hunks[-1].start, max(hunks[-1].stop, stop))
        else:
            hunks.append(Hunk(start, stop))

    return tuple(hunks)
