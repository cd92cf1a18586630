"""Read the --display option from the Typer context chain."""

from typing import Any

DISPLAY_FORMATS = ("table", "json", "yaml")


def _get_display_format(ctx: Any, default: str = "table") -> str:
    """Get the display format stored by the root callback.

    Args:
        ctx: The ``typer.Context`` of the running command

    Returns:
        The format set by the root callback, or ``default`` when no context
        in the chain carries one.

    Raises:
        ValueError: If an invalid display format value is encountered.
    """
    current = ctx
    while current is not None:
        obj = current.obj
        if isinstance(obj, dict) and "display_format" in obj:
            value = obj["display_format"]
            if value in DISPLAY_FORMATS:
                return value
            raise ValueError(f"Invalid display_format value: {value!r}")
        current = current.parent
    return default
