"""Unit tests for sbsdiff.api.compare.myers_diff module."""

import threading

import pytest

from sbsdiff.api.compare._CancelledError import _CancelledError
from sbsdiff.api.compare.EditOp import OpKind
from sbsdiff.api.compare.myers_diff import _shortest_edit, myers_diff

pytestmark = pytest.mark.unit


def replay(steps, a, b):
    old = [a[i] for kind, i, _ in steps if kind in (OpKind.KEEP, OpKind.DELETE)]
    new = [b[j] for kind, _, j in steps if kind in (OpKind.KEEP, OpKind.INSERT)]
    return old, new


class TestMyersDiff:
    """Test myers_diff function."""

    def test_identical_sequences_keep_everything(self):
        assert myers_diff(["a", "b"], ["a", "b"]) == ((OpKind.KEEP, 0, 0), (OpKind.KEEP, 1, 1))

    def test_empty_sequences(self):
        assert myers_diff([], []) == ()

    def test_all_inserted(self):
        assert [kind for kind, _, _ in myers_diff([], ["a", "b"])] == [OpKind.INSERT, OpKind.INSERT]

    def test_all_deleted(self):
        assert [kind for kind, _, _ in myers_diff(["a", "b"], [])] == [OpKind.DELETE, OpKind.DELETE]

    def test_script_is_minimal(self):
        a, b = list("ABCABBA"), list("CBABAC")
        steps = myers_diff(a, b)
        assert sum(1 for kind, _, _ in steps if kind is not OpKind.KEEP) == 5

    def test_replay_reconstructs_both_sequences(self):
        a, b = list("ABCABBA"), list("CBABAC")
        assert replay(myers_diff(a, b), a, b) == (a, b)

    def test_replay_with_repeated_elements(self):
        a = ["x", "", "x", "", "y"]
        b = ["", "x", "x", "z", "", "y", ""]
        assert replay(myers_diff(a, b), a, b) == (a, b)

    def test_substitution_deletes_before_inserts(self):
        assert myers_diff(["a", "x", "b"], ["a", "y", "b"]) == (
            (OpKind.KEEP, 0, 0),
            (OpKind.DELETE, 1, 1),
            (OpKind.INSERT, 2, 1),
            (OpKind.KEEP, 2, 2),
        )

    def test_no_insert_precedes_delete_between_keeps(self):
        steps = myers_diff(list("ABCABBA"), list("CBABAC"))
        seen_insert = False
        for kind, _, _ in steps:
            if kind is OpKind.KEEP:
                seen_insert = False
            elif kind is OpKind.INSERT:
                seen_insert = True
            else:
                assert not seen_insert

    def test_set_cancel_signal_raises(self):
        cancel = threading.Event()
        cancel.set()
        with pytest.raises(_CancelledError):
            myers_diff(["a"], ["b"], cancel)

    def test_unset_cancel_signal_is_ignored(self):
        assert len(myers_diff(["a"], ["b"], threading.Event())) == 2


class TestMyersDiffLargeInputs:
    """Test myers_diff on long sequences."""

    def test_frontiers_hold_only_live_diagonals(self):
        trace = _shortest_edit(list("abc"), list("xyz"), None)
        assert [len(frontier) for frontier in trace] == list(range(7))

    def test_common_ends_are_kept_without_search(self):
        a = ["same"] * 2000 + ["old"] + ["tail"] * 2000
        b = ["same"] * 2000 + ["new"] + ["tail"] * 2000
        steps = myers_diff(a, b)
        assert [step for step in steps if step[0] is not OpKind.KEEP] == [
            (OpKind.DELETE, 2000, 2000),
            (OpKind.INSERT, 2001, 2000),
        ]
        assert len(steps) == 4002

    @pytest.mark.timeout(10)
    def test_disjoint_sequences(self):
        a = [f"old {i}" for i in range(3000)]
        b = [f"new {i}" for i in range(3000)]
        steps = myers_diff(a, b)
        assert [kind for kind, _, _ in steps] == [OpKind.DELETE] * 3000 + [OpKind.INSERT] * 3000
        assert replay(steps, a, b) == (a, b)

    @pytest.mark.timeout(10)
    def test_scattered_edits_in_long_sequence(self):
        a = list("abcdefghijklmnopqrstuvwxyz" * 400)
        b = list(a)
        for i in range(500, len(b), 1000):
            b[i] = "#"
        steps = myers_diff(a, b)
        assert sum(1 for kind, _, _ in steps if kind is not OpKind.KEEP) == 2 * len(range(500, len(b), 1000))
        assert replay(steps, a, b) == (a, b)
