from __future__ import annotations

import re
from dataclasses import dataclass

from github import Github

# Not anchored: callers may pass a URL embedded in a longer piece of text.
_PULL_REQUEST_URL_RE = re.compile(r"https://github\.com/(?P<owner>[^/]+)/(?P<repo>[^/]+)/pull/(?P<number>[0-9]+)(/.*)?")


@dataclass(frozen=True)
class PullRequestReference:
    """Owner, repository and number of a GitHub pull request."""

    owner: str
    repo_name: str
    number: int

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo_name}"


def parse_pull_request_url(url: str) -> PullRequestReference | None:
    """Return the pull request a URL points to, or None if it is not a pull request URL.

    A trailing path such as ``/files`` or ``/commits`` is accepted and ignored.
    Raises ValueError when ``url`` is None.
    """
    if url is None:
        raise ValueError("url must not be None")

    match = _PULL_REQUEST_URL_RE.search(url)
    if match is None:
        return None

    return PullRequestReference(
        owner=match.group("owner"),
        repo_name=match.group("repo"),
        number=int(match.group("number")),
    )


def get_repo(repo_name: str, token: str, timeout: int = 30):
    return Github(token, timeout=timeout).get_repo(repo_name)


def get_pull(repo, pr_number: int):
    return repo.get_pull(pr_number)


def get_pull_commit_shas(pr) -> list[str]:
    """Return the SHAs of a pull request's commits, oldest first."""
    return [commit.sha for commit in pr.get_commits()]


def get_pull_request_commits(ref: PullRequestReference, token: str, timeout: int = 30) -> list[str]:
    """Fetch the commit SHAs currently on the branch of the referenced pull request."""
    repo = get_repo(ref.full_name, token, timeout=timeout)
    return get_pull_commit_shas(get_pull(repo, ref.number))
