"""Data models for the GitHub pull request API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class PullRequestRef:
    owner: str
    repo: str
    number: int

    @property
    def api_path(self) -> str:
        return f"/repos/{self.owner}/{self.repo}/pulls/{self.number}"


@dataclass(frozen=True)
class GitHubFile:
    """One entry of ``GET /repos/{owner}/{repo}/pulls/{n}/files``."""

    filename: str
    status: str
    additions: int
    deletions: int
    patch: str = ""
    previous_filename: Optional[str] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "GitHubFile":
        return cls(
            filename=data["filename"],
            status=data.get("status", "modified"),
            additions=int(data.get("additions", 0)),
            deletions=int(data.get("deletions", 0)),
            patch=data.get("patch") or "",
            previous_filename=data.get("previous_filename"),
        )
