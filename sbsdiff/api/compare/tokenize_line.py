"""Split a line into sub-diff tokens."""

import re

from .Granularity import Granularity

# Word runs, whitespace runs, or a single other character; covers every input character.
_WORD_TOKEN = re.compile(r"\w+|\s+|[^\w\s]")


def tokenize_line(text: str, granularity: Granularity) -> list[str]:
    """Tokenize a line; joining the tokens gives back ``text``.

    Args:
        text: Line text
        granularity: "character" for one token per character, "word" for
            word, whitespace and punctuation tokens

    Returns:
        Ordered tokens

    Raises:
        ValueError: If granularity is not recognized
    """
    if granularity == "character":
        return list(text)
    if granularity == "word":
        return _WORD_TOKEN.findall(text)
    raise ValueError(f"granularity must be 'character' or 'word' (found: {granularity!r})")
