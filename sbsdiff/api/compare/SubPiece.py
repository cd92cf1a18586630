"""Token-level fragment of a modified line."""

from dataclasses import dataclass

from .ChangeType import ChangeType

_ALLOWED = (ChangeType.UNCHANGED, ChangeType.INSERTED, ChangeType.DELETED)


@dataclass(frozen=True)
class SubPiece:
    """Run of tokens sharing one change type."""

    text: str
    change_type: ChangeType

    def __post_init__(self):
        if self.change_type not in _ALLOWED:
            raise ValueError(
                f"sub-piece change_type must be unchanged, inserted or deleted "
                f"(found: {self.change_type!r})"
            )
