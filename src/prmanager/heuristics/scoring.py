"""Aggregate statistics and the heuristic risk score."""

from __future__ import annotations

from typing import List, Optional, Sequence

from prmanager.config.schema import RiskLevel, ScoringConfig
from prmanager.heuristics.deps import has_major_bump
from prmanager.heuristics.models import FileChange, PRMeta, Stats
from prmanager.rules.models import FileType, Flag

LOW_RISK_AREAS = frozenset({FileType.DOCS, FileType.CONFIG, FileType.TEST})


def pr_body_present(pr: Optional[PRMeta], min_length: int = 20) -> bool:
    return bool(pr and pr.body and len(pr.body.strip()) > min_length)


def touched_areas(files: Sequence[FileChange]) -> List[FileType]:
    """Distinct file types, in first-seen order."""
    areas: List[FileType] = []
    for f in files:
        if f.type not in areas:
            areas.append(f.type)
    return areas


def calculate_stats(
    files: Sequence[FileChange],
    pr: Optional[PRMeta] = None,
    scoring: Optional[ScoringConfig] = None,
) -> Stats:
    """Summarise *files* and compute ``risk_score_pre``."""
    scoring = scoring or ScoringConfig()
    stats = Stats(
        total_files=len(files),
        additions=sum(f.additions for f in files),
        deletions=sum(f.deletions for f in files),
        touched_areas=touched_areas(files),
        has_tests_changed=any(f.type == FileType.TEST for f in files),
        has_migrations=any(f.type == FileType.DB for f in files),
        deps_major_bump=has_major_bump(files),
        pr_body_present=pr_body_present(pr, scoring.min_body_length),
    )
    stats.risk_score_pre = risk_score(stats, files, scoring)
    return stats


def risk_score(
    stats: Stats,
    files: Sequence[FileChange],
    scoring: Optional[ScoringConfig] = None,
) -> int:
    """Apply the weighted rule list and clamp the result into [0, 100]."""
    w = scoring or ScoringConfig()
    score = 0

    # Size
    if stats.additions > w.large_additions or stats.total_files > w.large_files:
        score += w.large_weight
    elif stats.additions > w.medium_additions or stats.total_files > w.medium_files:
        score += w.medium_weight

    # High-risk areas
    if any(f.has_flag(Flag.TOUCHES_AUTH) or f.has_flag(Flag.TOUCHES_PAYMENT) for f in files):
        score += w.sensitive_weight

    if stats.has_migrations:
        score += w.db_weight
        if not stats.has_tests_changed:
            score += w.db_without_tests_weight

    # Dependencies
    if stats.deps_major_bump:
        score += w.major_bump_weight
    if sum(1 for f in files if f.type == FileType.DEPS) > w.many_deps_files:
        score += w.many_deps_weight

    if FileType.CONFIG in stats.touched_areas or FileType.INFRA in stats.touched_areas:
        score += w.config_weight

    if any(f.has_flag(Flag.CHANGES_PUBLIC_API) for f in files):
        score += w.public_api_weight

    # Quality signals
    if any(f.type == FileType.CODE for f in files) and not stats.has_tests_changed:
        score += w.code_without_tests_weight
    if not stats.pr_body_present:
        score += w.missing_body_weight

    # Mitigations
    if stats.deletions > stats.additions and stats.has_tests_changed:
        score -= w.cleanup_with_tests_credit
    if set(stats.touched_areas) <= LOW_RISK_AREAS:
        score -= w.low_risk_only_credit

    return max(0, min(100, score))


def risk_level(score: int, scoring: Optional[ScoringConfig] = None) -> RiskLevel:
    w = scoring or ScoringConfig()
    if score >= w.high_level:
        return "High"
    if score >= w.medium_level:
        return "Medium"
    return "Low"
