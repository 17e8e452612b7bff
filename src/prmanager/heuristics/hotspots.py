"""Human-readable hotspot strings, most important first."""

from __future__ import annotations

from typing import List, Optional, Sequence

from prmanager.config.schema import ScoringConfig
from prmanager.heuristics.models import FileChange, Stats
from prmanager.rules.models import FileType, Flag

MAX_HOTSPOTS = 8


def _paths(files: Sequence[FileChange]) -> str:
    return ", ".join(f.path for f in files)


def generate_hotspots(
    files: Sequence[FileChange],
    stats: Stats,
    scoring: Optional[ScoringConfig] = None,
) -> List[str]:
    """Return at most ``MAX_HOTSPOTS`` observations; earlier checks win."""
    w = scoring or ScoringConfig()
    hotspots: List[str] = []

    if stats.total_files > w.large_files:
        hotspots.append(f"Large changeset: {stats.total_files} files modified")
    elif stats.total_files > w.medium_files:
        hotspots.append(f"Medium changeset: {stats.total_files} files modified")

    if stats.additions > w.large_additions:
        hotspots.append(f"High line count: {stats.additions} lines added")
    elif stats.additions > w.medium_additions:
        hotspots.append(f"Significant additions: {stats.additions} lines added")

    auth_files = [f for f in files if f.has_flag(Flag.TOUCHES_AUTH)]
    if auth_files:
        hotspots.append(f"Security-sensitive files: {_paths(auth_files)}")

    payment_files = [f for f in files if f.has_flag(Flag.TOUCHES_PAYMENT)]
    if payment_files:
        hotspots.append(f"Payment-related changes: {_paths(payment_files)}")

    if stats.has_migrations:
        db_files = [f for f in files if f.type == FileType.DB]
        hotspots.append(f"Database schema changes: {_paths(db_files)}")

    if stats.deps_major_bump:
        hotspots.append("Major dependency version bumps detected")

    dep_files = [f for f in files if f.type == FileType.DEPS]
    if len(dep_files) > w.many_deps_files:
        hotspots.append(f"Multiple dependency files changed: {len(dep_files)} files")

    api_files = [f for f in files if f.has_flag(Flag.CHANGES_PUBLIC_API)]
    if api_files:
        hotspots.append(f"Potential API changes: {_paths(api_files)}")

    if any(f.type == FileType.CODE for f in files) and not stats.has_tests_changed:
        hotspots.append("Code changes without corresponding test updates")

    if not stats.pr_body_present:
        hotspots.append("Missing or minimal PR description")

    return hotspots[:MAX_HOTSPOTS]
