"""Side-by-side comparison result."""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from .ChangeType import ChangeType
from .DiffLine import DiffLine

_OLD_PIECE_TYPES = frozenset({ChangeType.UNCHANGED, ChangeType.DELETED})
_NEW_PIECE_TYPES = frozenset({ChangeType.UNCHANGED, ChangeType.INSERTED})


@dataclass(frozen=True)
class DiffModel:
    """Two index-aligned columns of classified lines.

    ``old_side[i]`` and ``new_side[i]`` form visual row ``i``. At most one cell
    of a row is BLANK, and a MODIFIED cell is always paired with a MODIFIED
    cell. Old-side sub-pieces are UNCHANGED or DELETED, new-side ones
    UNCHANGED or INSERTED. ``show_line_numbers`` only affects rendering.
    """

    old_side: tuple[DiffLine, ...]
    new_side: tuple[DiffLine, ...]
    show_line_numbers: bool = True

    def _validate_rows(self) -> list[str]:
        errors: list[str] = []

        if len(self.old_side) != len(self.new_side):
            errors.append(
                f"old_side and new_side must have equal length "
                f"(found: {len(self.old_side)} and {len(self.new_side)})"
            )
            return errors

        for i, (old, new) in enumerate(zip(self.old_side, self.new_side)):
            if old.change_type is ChangeType.BLANK and new.change_type is ChangeType.BLANK:
                errors.append(f"row {i} is blank on both sides")
            if (old.change_type is ChangeType.MODIFIED) != (new.change_type is ChangeType.MODIFIED):
                errors.append(
                    f"row {i} must be modified on both sides or neither "
                    f"(found: {old.change_type.value}/{new.change_type.value})"
                )
            for side, cell, allowed in (("old", old, _OLD_PIECE_TYPES), ("new", new, _NEW_PIECE_TYPES)):
                bad = sorted({p.change_type.value for p in cell.sub_pieces or () if p.change_type not in allowed})
                if bad:
                    errors.append(f"row {i} {side} side has sub-pieces of the wrong kind (found: {', '.join(bad)})")

        return errors

    def __post_init__(self):
        errors = self._validate_rows()
        if errors:
            raise ValueError("Invalid diff model:\n" + "\n".join(f"  - {e}" for e in errors))

    def __len__(self) -> int:
        return len(self.old_side)

    def rows(self) -> Iterator[tuple[DiffLine, DiffLine]]:
        """Iterate (old, new) row pairs in display order."""
        return zip(self.old_side, self.new_side)

    @property
    def is_identical(self) -> bool:
        """True when every row is unchanged on both sides."""
        return all(old.change_type is ChangeType.UNCHANGED for old in self.old_side)

    def stats(self) -> dict[str, int]:
        """Row counts per classification."""
        counts = {
            "total_rows": len(self),
            "unchanged": 0,
            "inserted": 0,
            "deleted": 0,
            "modified": 0,
        }
        for old, new in self.rows():
            if old.change_type is ChangeType.UNCHANGED:
                counts["unchanged"] += 1
            elif old.change_type is ChangeType.MODIFIED:
                counts["modified"] += 1
            elif old.change_type is ChangeType.DELETED:
                counts["deleted"] += 1
            elif new.change_type is ChangeType.INSERTED:
                counts["inserted"] += 1
        return counts

    def to_dict(self) -> dict[str, Any]:
        """Convert to plain data for JSON/YAML output."""
        return {
            "show_line_numbers": self.show_line_numbers,
            "old_side": [cell.to_dict() for cell in self.old_side],
            "new_side": [cell.to_dict() for cell in self.new_side],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DiffModel":
        """Rebuild a model from ``to_dict`` output."""
        return cls(
            old_side=tuple(DiffLine.from_dict(cell) for cell in data["old_side"]),
            new_side=tuple(DiffLine.from_dict(cell) for cell in data["new_side"]),
            show_line_numbers=bool(data.get("show_line_numbers", True)),
        )
