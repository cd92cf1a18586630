"""Shared pytest configuration and fixtures for all tests."""

from collections.abc import Callable
from pathlib import Path

import pytest

from sbsdiff.api.compare.ChangeType import ChangeType
from sbsdiff.api.compare.DiffModel import DiffModel


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests of a single module")
    config.addinivalue_line("markers", "integration: tests that run the CLI entry point")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Command Helpers
# =============================================================================


@pytest.fixture
def run_cmd() -> Callable:
    """Execute a cmd function and return the result with progress_callback executed."""

    def _run(cmd_func, *args, **kwargs):
        result = cmd_func(*args, **kwargs)
        list(result.progress_callback(result))
        return result

    return _run


@pytest.fixture
def write_pair(tmp_path: Path) -> Callable[[str, str], tuple[Path, Path]]:
    """Write old/new documents to tmp_path and return their paths."""

    def _write(old_text: str, new_text: str) -> tuple[Path, Path]:
        old_path = tmp_path / "old.txt"
        new_path = tmp_path / "new.txt"
        old_path.write_text(old_text, encoding="utf-8", newline="")
        new_path.write_text(new_text, encoding="utf-8", newline="")
        return old_path, new_path

    return _write


# =============================================================================
# Model Helpers
# =============================================================================


def row_types(model: DiffModel) -> list[tuple[ChangeType, ChangeType]]:
    """(old, new) change type per row."""
    return [(old.change_type, new.change_type) for old, new in model.rows()]


def row_texts(model: DiffModel) -> list[tuple[str, str]]:
    """(old, new) text per row; blank cells give ''."""
    return [(old.text, new.text) for old, new in model.rows()]


def pieces(cell) -> list[tuple[ChangeType, str]]:
    """(type, text) for each sub-piece of a cell."""
    return [(p.change_type, p.text) for p in cell.sub_pieces]


@pytest.fixture
def model_helpers():
    """Row/piece inspection helpers for DiffModel assertions."""

    class _Helpers:
        types = staticmethod(row_types)
        texts = staticmethod(row_texts)
        sub_pieces = staticmethod(pieces)

    return _Helpers
