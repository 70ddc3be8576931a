"""Solution actuality check: pull request URL → live commits → classification."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from hwtrack_core.actuality import ActualityResult, StoredSolutionCommit, get_commit_actuality
from hwtrack_core.gh.pull_request import PullRequestReference, get_pull_request_commits, parse_pull_request_url

logger = logging.getLogger(__name__)

CommitFetcher = Callable[[PullRequestReference, str], Sequence[str]]


def check_solution(
    pull_request_url: str,
    last_commit: StoredSolutionCommit | None,
    token: str,
    fetch_commits: CommitFetcher = get_pull_request_commits,
) -> ActualityResult | None:
    """Return the commit actuality of a solution submitted as a pull request.

    Returns None when ``pull_request_url`` does not point to a GitHub pull
    request, i.e. pull request integration is unavailable for the solution.
    Errors raised while fetching commits (``github.GithubException``) are
    left to the caller.
    """
    ref = parse_pull_request_url(pull_request_url)
    if ref is None:
        logger.debug("Not a pull request URL, skipping actuality check: %s", pull_request_url)
        return None

    live_commits = list(fetch_commits(ref, token))
    logger.debug("Fetched %d commit(s) for %s#%d", len(live_commits), ref.full_name, ref.number)

    result = get_commit_actuality(live_commits, last_commit)
    logger.debug("Actuality of %s#%d: %s", ref.full_name, ref.number, result.reason.value)
    return result
