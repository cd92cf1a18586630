"""Edit script operation."""

from dataclasses import dataclass
from enum import Enum

from .Line import Line


class OpKind(str, Enum):
    """Kind of edit script step."""

    KEEP = "keep"
    DELETE = "delete"
    INSERT = "insert"


@dataclass(frozen=True)
class EditOp:
    """One step of a line edit script.

    ``line`` is the old line for KEEP and DELETE and the new line for INSERT.
    KEEP steps also carry ``new_line``, the matched line of the new document,
    which differs from ``line`` in text only when whitespace is ignored.
    """

    kind: OpKind
    line: Line
    new_line: Line | None = None
