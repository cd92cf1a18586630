"""Comparison entry point."""

import logging
from typing import Any

from ._CancelledError import _CancelledError
from .align import align
from .Cancelled import Cancelled
from .CompareConfig import CompareConfig
from .diff_lines import diff_lines
from .DiffModel import DiffModel
from .split_lines import split_lines

logger = logging.getLogger(__name__)


def compare(
    old_text: str,
    new_text: str,
    config: CompareConfig | None = None,
    cancel: Any = None,
) -> DiffModel | Cancelled:
    """Compare two texts into a side-by-side model.

    Pure function: no state is kept between calls, so concurrent calls from
    independent threads are safe. Callers re-run it whenever an input changes.

    Args:
        old_text: Old document text
        new_text: New document text
        config: Comparison options (defaults when None)
        cancel: Optional object with ``is_set()``, e.g. ``threading.Event``

    Returns:
        Complete DiffModel, or Cancelled if ``cancel`` was set before completion
    """
    config = config or CompareConfig()
    logger.debug(
        "Comparing texts: old=%d chars, new=%d chars, granularity=%s, ignore_whitespace=%s",
        len(old_text),
        len(new_text),
        config.granularity,
        config.ignore_whitespace,
    )

    try:
        old_lines = split_lines(old_text)
        new_lines = split_lines(new_text)
        ops = diff_lines(old_lines, new_lines, config.ignore_whitespace, cancel)
        old_side, new_side = align(ops, config.granularity, config.ignore_whitespace, cancel)
    except _CancelledError:
        logger.info("Comparison cancelled")
        return Cancelled()

    model = DiffModel(old_side=old_side, new_side=new_side, show_line_numbers=config.show_line_numbers)
    logger.debug("Comparison complete: %s", model.stats())
    return model
