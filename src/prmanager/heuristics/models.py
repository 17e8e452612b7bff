"""Analysis data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional

from prmanager.rules.models import FileType, Flag


@dataclass
class FileChange:
    """A classified, flagged file of the change set."""

    path: str
    type: FileType
    language: str
    additions: int
    deletions: int
    flags: List[Flag] = field(default_factory=list)
    patch_snippet: str = ""
    status: Optional[str] = None  # only for API-sourced files
    previous_path: Optional[str] = None  # renamed API files

    def has_flag(self, flag: Flag) -> bool:
        return flag in self.flags

    @property
    def changed_lines(self) -> int:
        return self.additions + self.deletions


@dataclass
class PRMeta:
    title: str
    number: int
    author: str
    created_at: str
    body: Optional[str] = None

    @classmethod
    def for_pasted_diff(cls) -> "PRMeta":
        return cls(
            title="Pasted Diff Analysis",
            number=0,
            author="unknown",
            created_at=datetime.now(timezone.utc).isoformat(),
        )


@dataclass
class Stats:
    total_files: int = 0
    additions: int = 0
    deletions: int = 0
    touched_areas: List[FileType] = field(default_factory=list)
    has_tests_changed: bool = False
    has_migrations: bool = False
    deps_major_bump: bool = False
    pr_body_present: bool = False
    risk_score_pre: int = 0


@dataclass
class AnalysisResult:
    """Complete result of one analysis run."""

    pr: PRMeta
    stats: Stats
    files: List[FileChange] = field(default_factory=list)
    hotspots: List[str] = field(default_factory=list)
    risk_level: str = "Low"
    duration_ms: float = 0.0

    @property
    def score(self) -> int:
        return self.stats.risk_score_pre
