"""Cancellation outcome."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Cancelled:
    """Returned instead of a model when a comparison was abandoned."""

    reason: str = "comparison cancelled"
