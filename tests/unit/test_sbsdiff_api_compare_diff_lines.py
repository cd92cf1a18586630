"""Unit tests for sbsdiff.api.compare.diff_lines module."""

import pytest

from sbsdiff.api.compare.diff_lines import diff_lines
from sbsdiff.api.compare.EditOp import OpKind
from sbsdiff.api.compare.split_lines import split_lines

pytestmark = pytest.mark.unit


class TestDiffLines:
    """Test diff_lines function."""

    def test_ops_carry_source_lines(self):
        ops = diff_lines(split_lines("a\nb"), split_lines("a\nc"))
        assert [(op.kind, op.line.text) for op in ops] == [
            (OpKind.KEEP, "a"),
            (OpKind.DELETE, "b"),
            (OpKind.INSERT, "c"),
        ]
        assert ops[1].line.number == 2
        assert ops[2].line.number == 2

    def test_keep_carries_matching_new_line(self):
        ops = diff_lines(split_lines("x\na"), split_lines("a"))
        keep = ops[-1]
        assert keep.kind is OpKind.KEEP
        assert keep.line.number == 2
        assert keep.new_line.number == 1

    def test_whitespace_sensitive_by_default(self):
        ops = diff_lines(split_lines("a  b "), split_lines("a b"))
        assert [op.kind for op in ops] == [OpKind.DELETE, OpKind.INSERT]

    def test_ignore_whitespace_matches_normalized_lines(self):
        ops = diff_lines(split_lines("  a  b "), split_lines("a b"), ignore_whitespace=True)
        assert [op.kind for op in ops] == [OpKind.KEEP]
        assert ops[0].line.text == "  a  b "
        assert ops[0].new_line.text == "a b"

    def test_ignore_whitespace_is_not_case_insensitive(self):
        ops = diff_lines(split_lines("A"), split_lines("a"), ignore_whitespace=True)
        assert [op.kind for op in ops] == [OpKind.DELETE, OpKind.INSERT]
