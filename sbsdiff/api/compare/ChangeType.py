"""Change classification for aligned rows and sub-pieces."""

from enum import Enum


class ChangeType(str, Enum):
    """Closed set of change kinds.

    BLANK is padding with no source content; it keeps both columns the
    same length and only ever appears at row level.
    """

    UNCHANGED = "unchanged"
    INSERTED = "inserted"
    DELETED = "deleted"
    MODIFIED = "modified"
    BLANK = "blank"
