"""Line-level edit script."""

from collections.abc import Sequence
from typing import Any

from .EditOp import EditOp, OpKind
from .Line import Line
from .myers_diff import myers_diff
from .normalize_whitespace import normalize_line


def diff_lines(
    old_lines: Sequence[Line],
    new_lines: Sequence[Line],
    ignore_whitespace: bool = False,
    cancel: Any = None,
) -> tuple[EditOp, ...]:
    """Compute the minimal edit script between two line sequences.

    Replaying KEEP and DELETE lines gives ``old_lines``; replaying KEEP
    ``new_line`` values and INSERT lines gives ``new_lines``.

    Args:
        old_lines: Lines of the old document
        new_lines: Lines of the new document
        ignore_whitespace: Compare lines with whitespace trimmed and collapsed
        cancel: Optional cancellation signal

    Returns:
        Ordered edit operations
    """
    key = normalize_line if ignore_whitespace else str
    old_keys = [key(line.text) for line in old_lines]
    new_keys = [key(line.text) for line in new_lines]

    ops: list[EditOp] = []
    for kind, i, j in myers_diff(old_keys, new_keys, cancel):
        if kind is OpKind.KEEP:
            ops.append(EditOp(OpKind.KEEP, old_lines[i], new_lines[j]))
        elif kind is OpKind.DELETE:
            ops.append(EditOp(OpKind.DELETE, old_lines[i]))
        else:
            ops.append(EditOp(OpKind.INSERT, new_lines[j]))
    return tuple(ops)
