"""GitHub pull request source — URL parsing, API client, models."""

from prmanager.github.client import GitHubError, fetch_pull_request, parse_pr_url
from prmanager.github.models import GitHubFile, PullRequestRef
from prmanager.github.patch import truncate_patch

__all__ = [
    "GitHubError",
    "GitHubFile",
    "PullRequestRef",
    "fetch_pull_request",
    "parse_pr_url",
    "truncate_patch",
]
