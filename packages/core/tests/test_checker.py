"""Tests for the solution actuality check."""

from unittest.mock import MagicMock

import pytest
from github import GithubException

from hwtrack_core.actuality import ActualityReason, StoredSolutionCommit
from hwtrack_core.checker import check_solution
from hwtrack_core.gh.pull_request import PullRequestReference

URL = "https://github.com/acme/widgets/pull/42/files"


class TestCheckSolution:
    def test_non_pull_request_url_returns_none(self):
        fetch = MagicMock()
        assert check_solution("https://example.com/solution.zip", StoredSolutionCommit("a"), "tok", fetch) is None
        fetch.assert_not_called()

    def test_fetches_commits_for_parsed_reference(self):
        fetch = MagicMock(return_value=["a", "b"])
        check_solution(URL, StoredSolutionCommit("b"), "tok", fetch)
        fetch.assert_called_once_with(PullRequestReference("acme", "widgets", 42), "tok")

    def test_actual(self):
        result = check_solution(URL, StoredSolutionCommit("b"), "tok", MagicMock(return_value=["a", "b"]))
        assert result.is_actual is True

    def test_new_commits(self):
        result = check_solution(URL, StoredSolutionCommit("a"), "tok", MagicMock(return_value=["a", "b"]))
        assert result.reason is ActualityReason.NEW_COMMITS_ADDED

    def test_accepts_generator_from_fetcher(self):
        result = check_solution(URL, StoredSolutionCommit("b"), "tok", lambda ref, token: (c for c in ["a", "b"]))
        assert result.is_actual is True

    def test_github_errors_propagate(self):
        fetch = MagicMock(side_effect=GithubException(404, {"message": "Not Found"}, None))
        with pytest.raises(GithubException):
            check_solution(URL, None, "tok", fetch)
