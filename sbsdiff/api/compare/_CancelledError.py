"""Internal signal used to unwind a cancelled comparison."""

from typing import Any


class _CancelledError(Exception):
    """Raised inside the engine when the cancellation signal is set."""


def _check_cancel(cancel: Any) -> None:
    """Raise _CancelledError if ``cancel`` is set.

    Args:
        cancel: None or any object exposing ``is_set()`` (e.g. threading.Event)
    """
    if cancel is not None and cancel.is_set():
        raise _CancelledError()
