"""One cell of a side-by-side row."""

from dataclasses import dataclass
from typing import Any

from .ChangeType import ChangeType
from .Line import Line
from .SubPiece import SubPiece


@dataclass(frozen=True)
class DiffLine:
    """Classified line on one side of the comparison.

    ``line`` is absent exactly when the cell is BLANK; ``sub_pieces`` is
    present exactly when the cell is MODIFIED.
    """

    change_type: ChangeType
    line: Line | None = None
    sub_pieces: tuple[SubPiece, ...] | None = None

    def __post_init__(self):
        errors: list[str] = []
        if (self.change_type is ChangeType.BLANK) != (self.line is None):
            errors.append(f"line must be absent iff change_type is blank (found: {self.change_type.value}, {self.line!r})")
        if (self.change_type is ChangeType.MODIFIED) != (self.sub_pieces is not None):
            errors.append(f"sub_pieces must be present iff change_type is modified (found: {self.change_type.value})")
        if errors:
            raise ValueError("; ".join(errors))

    @classmethod
    def blank(cls) -> "DiffLine":
        return cls(ChangeType.BLANK)

    @property
    def text(self) -> str:
        """Source text, or an empty string for a blank cell."""
        return self.line.text if self.line is not None else ""

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "type": self.change_type.value,
            "number": self.line.number if self.line is not None else None,
            "text": self.line.text if self.line is not None else None,
        }
        if self.sub_pieces is not None:
            data["sub_pieces"] = [{"type": p.change_type.value, "text": p.text} for p in self.sub_pieces]
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DiffLine":
        """Rebuild a cell from ``to_dict`` output."""
        change_type = ChangeType(data["type"])
        line = None if change_type is ChangeType.BLANK else Line(text=data["text"], number=data["number"])
        sub_pieces = None
        if data.get("sub_pieces") is not None:
            sub_pieces = tuple(SubPiece(p["text"], ChangeType(p["type"])) for p in data["sub_pieces"])
        return cls(change_type, line, sub_pieces)
