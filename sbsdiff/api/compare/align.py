"""Side-by-side alignment of a line edit script."""

from collections.abc import Sequence
from typing import Any

from ._CancelledError import _check_cancel
from .ChangeType import ChangeType
from .diff_chars import diff_chars
from .DiffLine import DiffLine
from .EditOp import EditOp, OpKind
from .Granularity import Granularity


def _take_run(ops: Sequence[EditOp], start: int, kind: OpKind) -> int:
    """Return the end index of the run of ``kind`` ops starting at ``start``."""
    end = start
    while end < len(ops) and ops[end].kind is kind:
        end += 1
    return end


def align(
    ops: Sequence[EditOp],
    granularity: Granularity = "character",
    ignore_whitespace: bool = False,
    cancel: Any = None,
) -> tuple[tuple[DiffLine, ...], tuple[DiffLine, ...]]:
    """Lay an edit script out as two equal-length columns.

    A run of deletes directly followed by a run of inserts (or the reverse)
    forms a block. Within a block the i-th delete is paired with the i-th
    insert as a MODIFIED row; the paired rows come first, then leftover
    deletes against blanks, then leftover inserts against blanks.

    Args:
        ops: Line edit script
        granularity: Sub-diff granularity for modified rows
        ignore_whitespace: Whitespace policy for the sub-diff
        cancel: Optional cancellation signal, checked once per block

    Returns:
        (old_side, new_side)
    """
    old_side: list[DiffLine] = []
    new_side: list[DiffLine] = []
    pos = 0

    while pos < len(ops):
        op = ops[pos]

        if op.kind is OpKind.KEEP:
            old_side.append(DiffLine(ChangeType.UNCHANGED, op.line))
            new_side.append(DiffLine(ChangeType.UNCHANGED, op.new_line or op.line))
            pos += 1
            continue

        _check_cancel(cancel)
        first_end = _take_run(ops, pos, op.kind)
        other = OpKind.INSERT if op.kind is OpKind.DELETE else OpKind.DELETE
        second_end = _take_run(ops, first_end, other)

        first, second = ops[pos:first_end], ops[first_end:second_end]
        deletes, inserts = (first, second) if op.kind is OpKind.DELETE else (second, first)
        paired = min(len(deletes), len(inserts))

        for old_op, new_op in zip(deletes[:paired], inserts[:paired]):
            old_pieces, new_pieces = diff_chars(
                old_op.line.text, new_op.line.text, granularity, ignore_whitespace, cancel
            )
            old_side.append(DiffLine(ChangeType.MODIFIED, old_op.line, old_pieces))
            new_side.append(DiffLine(ChangeType.MODIFIED, new_op.line, new_pieces))

        for old_op in deletes[paired:]:
            old_side.append(DiffLine(ChangeType.DELETED, old_op.line))
            new_side.append(DiffLine.blank())

        for new_op in inserts[paired:]:
            old_side.append(DiffLine.blank())
            new_side.append(DiffLine(ChangeType.INSERTED, new_op.line))

        pos = second_end

    return tuple(old_side), tuple(new_side)
