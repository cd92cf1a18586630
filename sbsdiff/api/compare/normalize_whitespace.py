"""Comparison keys for whitespace-insensitive matching."""


def normalize_line(text: str) -> str:
    """Trim and collapse internal whitespace runs to a single space."""
    return " ".join(text.split())


def normalize_token(token: str) -> str:
    """Map any all-whitespace token to a single space."""
    return " " if token.isspace() else token
