"""Read a document for comparison."""

import logging
from pathlib import Path

from .LoadError import LoadError

logger = logging.getLogger(__name__)


def load_text(path: Path | str) -> str:
    """Read a text file as UTF-8, replacing undecodable bytes.

    Args:
        path: File path

    Returns:
        File contents

    Raises:
        LoadError: If the path is missing, is not a regular file, or cannot be read
    """
    file_path = Path(path).expanduser()

    if not file_path.exists():
        raise LoadError(file_path, "file not found")
    if not file_path.is_file():
        raise LoadError(file_path, "not a regular file")

    try:
        text = file_path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise LoadError(file_path, str(exc)) from exc

    logger.debug("Loaded %s (%d chars)", file_path, len(text))
    return text
