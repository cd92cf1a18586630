"""Myers shortest edit script.

Implements the greedy forward search from Myers, "An O(ND) Difference
Algorithm and Its Variations" (1986), recording the frontier of every edit
distance so the path can be walked back from the end. Time is O((N+M)·D).
The common prefix and suffix are matched before the search, and each
recorded frontier holds only its live diagonals, one machine word each.
"""

from array import array
from collections.abc import Hashable, Iterator, Sequence
from typing import Any

from ._CancelledError import _check_cancel
from .EditOp import OpKind

Step = tuple[OpKind, int, int]


def _shortest_edit(a: Sequence[Hashable], b: Sequence[Hashable], cancel: Any) -> list[array]:
    """Return the frontier taken before each edit distance d.

    ``trace[d]`` holds the furthest x reached on diagonals ``-d+1, -d+3, ..., d-1``.
    """
    n, m = len(a), len(b)
    offset = n + m + 1
    v = [0] * (2 * offset + 1)
    trace: list[array] = []

    for d in range(n + m + 1):
        _check_cancel(cancel)
        trace.append(array("q", v[offset - d + 1 : offset + d : 2]))

        for k in range(-d, d + 1, 2):
            if k == -d or (k != d and v[offset + k - 1] < v[offset + k + 1]):
                x = v[offset + k + 1]
            else:
                x = v[offset + k - 1] + 1
            y = x - k

            while x < n and y < m and a[x] == b[y]:
                x += 1
                y += 1

            v[offset + k] = x
            if x >= n and y >= m:
                return trace

    return trace


def _backtrack(trace: list[array], n: int, m: int) -> Iterator[Step]:
    """Walk the recorded frontiers from (n, m) back to the origin, yielding steps in reverse."""
    x, y = n, m

    for d in range(len(trace) - 1, 0, -1):
        frontier = trace[d]
        k = x - y

        # diagonal j sits at frontier[(j + d - 1) // 2]
        if k == -d or (k != d and frontier[(k + d - 2) // 2] < frontier[(k + d) // 2]):
            prev_k = k + 1
        else:
            prev_k = k - 1

        prev_x = frontier[(prev_k + d - 1) // 2]
        prev_y = prev_x - prev_k

        while x > prev_x and y > prev_y:
            x -= 1
            y -= 1
            yield (OpKind.KEEP, x, y)

        if x == prev_x:
            yield (OpKind.INSERT, prev_x, prev_y)
        else:
            yield (OpKind.DELETE, prev_x, prev_y)

        x, y = prev_x, prev_y

    while x > 0 and y > 0:
        x -= 1
        y -= 1
        yield (OpKind.KEEP, x, y)


def _middle_steps(a: Sequence[Hashable], b: Sequence[Hashable], cancel: Any) -> list[Step]:
    """Edit script for two sequences that share no prefix or suffix."""
    if a and b and set(a).isdisjoint(b):
        _check_cancel(cancel)
        steps = [(OpKind.DELETE, i, 0) for i in range(len(a))]
        steps.extend((OpKind.INSERT, len(a), j) for j in range(len(b)))
        return steps

    steps = list(_backtrack(_shortest_edit(a, b, cancel), len(a), len(b)))
    steps.reverse()
    return steps


def _deletes_first(steps: list[Step]) -> tuple[Step, ...]:
    """Reorder each run of non-keep steps so its deletes come before its inserts."""
    ordered: list[Step] = []
    deletes: list[Step] = []
    inserts: list[Step] = []

    for step in steps:
        if step[0] is OpKind.KEEP:
            ordered.extend(deletes)
            ordered.extend(inserts)
            deletes.clear()
            inserts.clear()
            ordered.append(step)
        elif step[0] is OpKind.DELETE:
            deletes.append(step)
        else:
            inserts.append(step)

    ordered.extend(deletes)
    ordered.extend(inserts)
    return tuple(ordered)


def myers_diff(a: Sequence[Hashable], b: Sequence[Hashable], cancel: Any = None) -> tuple[Step, ...]:
    """Compute a minimal edit script turning ``a`` into ``b``.

    Elements are compared with ``==`` only. Steps are ``(kind, i, j)`` where
    ``i`` indexes ``a`` (KEEP, DELETE) and ``j`` indexes ``b`` (KEEP, INSERT);
    the unused index is the position in the other sequence. Between two KEEP
    steps all DELETEs precede all INSERTs.

    Args:
        a: Old sequence of comparison keys
        b: New sequence of comparison keys
        cancel: Optional object with ``is_set()``; checked once per edit distance

    Returns:
        Ordered edit script

    Raises:
        _CancelledError: If ``cancel`` becomes set during the search
    """
    n, m = len(a), len(b)
    start = 0
    while start < n and start < m and a[start] == b[start]:
        start += 1
    end_a, end_b = n, m
    while end_a > start and end_b > start and a[end_a - 1] == b[end_b - 1]:
        end_a -= 1
        end_b -= 1

    steps: list[Step] = [(OpKind.KEEP, i, i) for i in range(start)]
    for kind, i, j in _middle_steps(a[start:end_a], b[start:end_b], cancel):
        steps.append((kind, i + start, j + start))
    steps.extend((OpKind.KEEP, end_a + t, end_b + t) for t in range(n - end_a))
    return _deletes_first(steps)
