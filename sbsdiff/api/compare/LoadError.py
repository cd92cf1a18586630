"""File loading error."""

from pathlib import Path


class LoadError(Exception):
    """Raised when a document cannot be read."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read {path}: {reason}")
