"""Source line value."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Line:
    """A line of a source document.

    ``number`` is the 1-based position in the document and is only used for
    display numbering, never for matching.
    """

    text: str
    number: int
