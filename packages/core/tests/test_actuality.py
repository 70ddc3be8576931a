"""Tests for commit actuality classification."""

import pytest

from hwtrack_core.actuality import ActualityReason, ActualityResult, StoredSolutionCommit, get_commit_actuality

LIVE = ["x", "y", "z"]


class TestGetCommitActuality:
    def test_no_stored_commit(self):
        result = get_commit_actuality([], None)
        assert result.is_actual is False
        assert result.reason is ActualityReason.NO_STORED_COMMIT
        assert "No commit information" in result.comment
        assert result.additional_data == ""

    def test_no_stored_commit_wins_over_live_commits(self):
        result = get_commit_actuality(LIVE, None)
        assert result.reason is ActualityReason.NO_STORED_COMMIT

    def test_commits_removed(self):
        result = get_commit_actuality([], StoredSolutionCommit("abc"))
        assert result.is_actual is False
        assert result.reason is ActualityReason.COMMITS_REMOVED
        assert "force push" in result.comment
        assert result.additional_data == "abc"

    def test_last_commit_not_found(self):
        result = get_commit_actuality(LIVE, StoredSolutionCommit("w"))
        assert result.is_actual is False
        assert result.reason is ActualityReason.LAST_COMMIT_NOT_FOUND
        assert "not found" in result.comment
        assert result.additional_data == "w"

    def test_new_commits_added(self):
        result = get_commit_actuality(LIVE, StoredSolutionCommit("x"))
        assert result.is_actual is False
        assert result.reason is ActualityReason.NEW_COMMITS_ADDED
        assert "New commits" in result.comment
        assert result.additional_data == "x"

    def test_actual(self):
        result = get_commit_actuality(LIVE, StoredSolutionCommit("z"))
        assert result.is_actual is True
        assert result.reason is ActualityReason.ACTUAL
        assert result.comment == ""
        assert result.additional_data == "z"

    def test_duplicate_live_commits(self):
        result = get_commit_actuality(["z", "x", "z"], StoredSolutionCommit("z"))
        assert result.is_actual is True

    def test_accepts_tuple(self):
        result = get_commit_actuality(("x", "y"), StoredSolutionCommit("y"))
        assert result.is_actual is True

    def test_idempotent(self):
        stored = StoredSolutionCommit("x")
        assert get_commit_actuality(LIVE, stored) == get_commit_actuality(LIVE, stored)

    def test_does_not_mutate_input(self):
        live = list(LIVE)
        get_commit_actuality(live, StoredSolutionCommit("y"))
        assert live == LIVE

    @pytest.mark.parametrize(
        "live, stored",
        [
            ([], None),
            (LIVE, None),
            ([], StoredSolutionCommit("a")),
            (LIVE, StoredSolutionCommit("w")),
            (LIVE, StoredSolutionCommit("y")),
            (LIVE, StoredSolutionCommit("z")),
        ],
    )
    def test_is_actual_iff_comment_empty(self, live, stored):
        result = get_commit_actuality(live, stored)
        assert result.is_actual == (result.comment == "")


class TestActualityResult:
    def test_reason_codes_are_distinct(self):
        comments = {ActualityResult.from_reason(r).comment for r in ActualityReason}
        assert len(comments) == len(ActualityReason)

    def test_to_dict(self):
        result = get_commit_actuality(LIVE, StoredSolutionCommit("x"))
        assert result.to_dict() == {
            "is_actual": False,
            "comment": result.comment,
            "additional_data": "x",
            "reason": "new_commits_added",
        }

    def test_frozen(self):
        result = get_commit_actuality(LIVE, StoredSolutionCommit("z"))
        with pytest.raises(AttributeError):
            result.is_actual = False
