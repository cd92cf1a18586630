"""Token-level sub-diff of a modified line pair."""

from typing import Any

from .ChangeType import ChangeType
from .EditOp import OpKind
from .Granularity import Granularity
from .myers_diff import myers_diff
from .normalize_whitespace import normalize_token
from .SubPiece import SubPiece
from .tokenize_line import tokenize_line

_EMPTY_LINE = (SubPiece(" ", ChangeType.UNCHANGED),)


def _coalesce(tokens: list[tuple[str, ChangeType]]) -> tuple[SubPiece, ...]:
    """Merge adjacent tokens of the same type, left to right."""
    pieces: list[SubPiece] = []
    text = ""
    current: ChangeType | None = None

    for token, change_type in tokens:
        if change_type is current:
            text += token
            continue
        if current is not None:
            pieces.append(SubPiece(text, current))
        text, current = token, change_type

    if current is not None:
        pieces.append(SubPiece(text, current))
    return tuple(pieces)


def diff_chars(
    old_text: str,
    new_text: str,
    granularity: Granularity = "character",
    ignore_whitespace: bool = False,
    cancel: Any = None,
) -> tuple[tuple[SubPiece, ...], tuple[SubPiece, ...]]:
    """Diff two lines at token granularity.

    The old side gets UNCHANGED and DELETED pieces, the new side UNCHANGED and
    INSERTED pieces. An empty line is represented by a single unchanged space.

    Args:
        old_text: Text of the old line
        new_text: Text of the new line
        granularity: "character" or "word"
        ignore_whitespace: Treat all whitespace tokens as equal
        cancel: Optional cancellation signal

    Returns:
        (old_pieces, new_pieces)
    """
    old_tokens = tokenize_line(old_text, granularity)
    new_tokens = tokenize_line(new_text, granularity)

    if ignore_whitespace:
        old_keys = [normalize_token(t) for t in old_tokens]
        new_keys = [normalize_token(t) for t in new_tokens]
    else:
        old_keys, new_keys = old_tokens, new_tokens

    old_runs: list[tuple[str, ChangeType]] = []
    new_runs: list[tuple[str, ChangeType]] = []
    for kind, i, j in myers_diff(old_keys, new_keys, cancel):
        if kind is OpKind.KEEP:
            old_runs.append((old_tokens[i], ChangeType.UNCHANGED))
            new_runs.append((new_tokens[j], ChangeType.UNCHANGED))
        elif kind is OpKind.DELETE:
            old_runs.append((old_tokens[i], ChangeType.DELETED))
        else:
            new_runs.append((new_tokens[j], ChangeType.INSERTED))

    old_pieces = _coalesce(old_runs) or _EMPTY_LINE
    new_pieces = _coalesce(new_runs) or _EMPTY_LINE
    return old_pieces, new_pieces
