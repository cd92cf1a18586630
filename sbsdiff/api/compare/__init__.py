"""Compare module - side-by-side text comparison."""

from .Cancelled import Cancelled
from .ChangeType import ChangeType
from .collapse_context import Hunk, collapse_context
from .compare import compare
from .CompareConfig import CompareConfig
from .CompareConfigError import CompareConfigError
from .diff_chars import diff_chars
from .diff_lines import diff_lines
from .DiffLine import DiffLine
from .DiffModel import DiffModel
from .EditOp import EditOp, OpKind
from .Line import Line
from .LoadError import LoadError
from .load_text import load_text
from .split_lines import split_lines
from .SubPiece import SubPiece

__all__ = [
    "Cancelled",
    "ChangeType",
    "CompareConfig",
    "CompareConfigError",
    "DiffLine",
    "DiffModel",
    "EditOp",
    "Hunk",
    "Line",
    "LoadError",
    "OpKind",
    "SubPiece",
    "collapse_context",
    "compare",
    "diff_chars",
    "diff_lines",
    "load_text",
    "split_lines",
]
