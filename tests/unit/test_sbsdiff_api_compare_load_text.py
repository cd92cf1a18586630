"""Unit tests for sbsdiff.api.compare.load_text module."""

import pytest

from sbsdiff.api.compare.load_text import load_text
from sbsdiff.api.compare.LoadError import LoadError

pytestmark = pytest.mark.unit


class TestLoadText:
    """Test load_text function."""

    def test_reads_utf8(self, tmp_path):
        path = tmp_path / "a.txt"
        path.write_text("Hello 世界\n", encoding="utf-8")
        assert load_text(path) == "Hello 世界\n"

    def test_accepts_string_path(self, tmp_path):
        path = tmp_path / "a.txt"
        path.write_text("x", encoding="utf-8")
        assert load_text(str(path)) == "x"

    def test_keeps_crlf(self, tmp_path):
        path = tmp_path / "a.txt"
        path.write_bytes(b"a\r\nb\r\n")
        assert load_text(path) == "a\r\nb\r\n"

    def test_invalid_utf8_is_replaced(self, tmp_path):
        path = tmp_path / "a.bin"
        path.write_bytes(b"ok\xff\n")
        assert load_text(path) == "ok�\n"

    def test_missing_file(self, tmp_path):
        with pytest.raises(LoadError, match="file not found") as exc:
            load_text(tmp_path / "missing.txt")
        assert exc.value.path == tmp_path / "missing.txt"

    def test_directory(self, tmp_path):
        with pytest.raises(LoadError, match="not a regular file"):
            load_text(tmp_path)
