"""Compare command."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from ..StageResult import StageResult
from .Cancelled import Cancelled
from .compare import compare
from .CompareConfig import CompareConfig
from .LoadError import LoadError
from .load_text import load_text


def cmd_compare(old_path: str, new_path: str, config: CompareConfig, cancel: Any = None) -> StageResult:
    """Load two files and compare them side by side.

    Output keys: old_path, new_path, config, stats, is_identical, model, errors.
    """

    def failure_output(errors: list[str]) -> dict[str, Any]:
        return {
            "old_path": old_path,
            "new_path": new_path,
            "config": config.model_dump(mode="python"),
            "stats": {},
            "is_identical": False,
            "model": None,
            "errors": errors,
        }

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading documents")
        try:
            old_text = load_text(old_path)
            new_text = load_text(new_path)
        except LoadError as exc:
            yield (1.0, "Failed")
            result_obj.result = f"Compare failed: {exc}"
            result_obj.output = failure_output([str(exc)])
            result_obj.success = False
            return

        yield (0.4, "Computing differences")
        outcome = compare(old_text, new_text, config, cancel)

        if isinstance(outcome, Cancelled):
            yield (1.0, "Cancelled")
            result_obj.result = f"Compare cancelled: {outcome.reason}"
            result_obj.output = failure_output([outcome.reason])
            result_obj.success = False
            return

        stats = outcome.stats()
        yield (1.0, "Complete")
        if outcome.is_identical:
            result_obj.result = "Documents are identical."
        else:
            result_obj.result = (
                f"Compared {stats['total_rows']} rows "
                f"(+{stats['inserted']}, -{stats['deleted']}, ~{stats['modified']})."
            )
        result_obj.output = {
            "old_path": old_path,
            "new_path": new_path,
            "config": config.model_dump(mode="python"),
            "stats": stats,
            "is_identical": outcome.is_identical,
            "model": outcome.to_dict(),
            "errors": [],
        }
        result_obj.success = True

    return StageResult(
        announce=f"Comparing {old_path} vs {new_path}...",
        progress_callback=do_work,
    )
