"""Split a document into lines."""

from .Line import Line


def split_lines(text: str) -> tuple[Line, ...]:
    """Split text into numbered lines.

    Lines end at ``\\n``; a ``\\r`` directly before it is dropped so that
    ``\\r\\n`` and ``\\n`` documents compare equal. A final newline terminates
    the last line rather than starting an empty one. Empty lines inside the
    document are kept.

    Args:
        text: Document text (any string)

    Returns:
        Lines numbered from 1; empty tuple for empty text
    """
    if not text:
        return ()

    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()

    return tuple(
        Line(text=part[:-1] if part.endswith("\r") else part, number=i)
        for i, part in enumerate(parts, start=1)
    )
