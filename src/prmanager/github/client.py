"""GitHub REST client — PR URL parsing, PR metadata and changed files."""

from __future__ import annotations

import logging
import re
from typing import Any, List, Optional, Tuple

import requests

from prmanager.github.models import GitHubFile, PullRequestRef
from prmanager.heuristics.models import PRMeta

API_ROOT = "https://api.github.com"
USER_AGENT = "PR-Manager/1.0"
PER_PAGE = 100
MAX_PAGES = 30  # the files endpoint stops at 3000 entries
TIMEOUT = 30

_PR_URL_RE = re.compile(r"github\.com/([^/]+)/([^/]+)/pull/(\d+)")

_STATUS_MESSAGES = {
    404: (
        "PR not found. Please check: URL is correct, repository is public, "
        "PR number exists. Try providing a GitHub token for private repos."
    ),
    403: (
        "Access denied. This could be: rate limit exceeded (try again in a few minutes), "
        "private repository (provide a GitHub token), or invalid token permissions."
    ),
    401: (
        "Authentication failed. Please check your GitHub token is valid "
        "and has repo access permissions."
    ),
}

logger = logging.getLogger(__name__)


class GitHubError(Exception):
    """Raised when the GitHub API cannot provide the pull request."""


def parse_pr_url(url: str) -> Optional[PullRequestRef]:
    """Extract owner, repo and number from a pull request URL."""
    m = _PR_URL_RE.search(url)
    if m is None:
        return None
    return PullRequestRef(owner=m.group(1), repo=m.group(2), number=int(m.group(3)))


def _headers(token: Optional[str]) -> dict[str, str]:
    headers = {
        "Accept": "application/vnd.github.v3+json",
        "User-Agent": USER_AGENT,
    }
    if token:
        headers["Authorization"] = f"token {token}"
    return headers


def _get_json(session: Any, url: str, headers: dict[str, str], params=None) -> Any:
    try:
        response = session.get(url, headers=headers, params=params, timeout=TIMEOUT)
    except requests.RequestException as exc:
        raise GitHubError(f"Failed to fetch PR data: {exc}") from exc

    if response.status_code in _STATUS_MESSAGES:
        raise GitHubError(_STATUS_MESSAGES[response.status_code])
    try:
        response.raise_for_status()
    except requests.HTTPError as exc:
        raise GitHubError(f"Failed to fetch PR data: {exc}") from exc
    try:
        return response.json()
    except ValueError as exc:
        raise GitHubError(f"Failed to fetch PR data: invalid JSON from {url}") from exc


def fetch_pull_request(
    ref: PullRequestRef,
    token: Optional[str] = None,
    session: Optional[Any] = None,
) -> Tuple[PRMeta, List[GitHubFile]]:
    """Fetch PR metadata and every changed file of *ref*."""
    session = session or requests.Session()
    headers = _headers(token)
    base = f"{API_ROOT}{ref.api_path}"

    logger.debug("Fetching %s", base)
    data = _get_json(session, base, headers)
    if not isinstance(data, dict):
        raise GitHubError("Failed to fetch PR data: unexpected pull request payload")
    pr = PRMeta(
        title=data.get("title", ""),
        number=data.get("number", ref.number),
        author=(data.get("user") or {}).get("login", "unknown"),
        created_at=data.get("created_at", ""),
        body=data.get("body") or None,
    )

    files: List[GitHubFile] = []
    for page in range(1, MAX_PAGES + 1):
        chunk = _get_json(
            session,
            f"{base}/files",
            headers,
            params={"per_page": PER_PAGE, "page": page},
        )
        if not isinstance(chunk, list):
            raise GitHubError("Failed to fetch PR data: unexpected files payload")
        try:
            files.extend(GitHubFile.from_api(item) for item in chunk)
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            raise GitHubError(f"Failed to fetch PR data: malformed file entry ({exc!r})") from exc
        if len(chunk) < PER_PAGE:
            break

    logger.debug("PR #%d: %d file(s)", pr.number, len(files))
    return pr, files
