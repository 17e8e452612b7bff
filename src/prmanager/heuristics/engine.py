"""Analysis pipeline — file records in, scored AnalysisResult out."""

from __future__ import annotations

import logging
import time
from typing import Iterable, List, Optional, Sequence

from prmanager.config.schema import PRManagerConfig
from prmanager.git.diff_parser import parse_diff
from prmanager.github.models import GitHubFile
from prmanager.heuristics import files as file_builder
from prmanager.heuristics.hotspots import generate_hotspots
from prmanager.heuristics.models import AnalysisResult, FileChange, PRMeta
from prmanager.heuristics.scoring import calculate_stats, risk_level
from prmanager.rules.models import FileType
from prmanager.rules.registry import RuleRegistry, default_registry

NOTABLE_FILES = 25

_TYPE_PRIORITY = {
    FileType.CODE: 0,
    FileType.DB: 1,
    FileType.DEPS: 2,
    FileType.CONFIG: 3,
    FileType.TEST: 4,
    FileType.INFRA: 5,
    FileType.DOCS: 6,
}

logger = logging.getLogger(__name__)


class AnalysisLimitError(Exception):
    """Raised when a change set is too large to analyse."""


def check_limits(files: Sequence[FileChange], config: Optional[PRManagerConfig] = None) -> None:
    limits = (config or PRManagerConfig()).analyze
    if len(files) > limits.max_files:
        raise AnalysisLimitError(
            f"Too many files ({len(files)}). Please limit to {limits.max_files} files "
            "or paste a focused diff."
        )
    total_lines = sum(f.changed_lines for f in files)
    if total_lines > limits.max_changed_lines:
        raise AnalysisLimitError(
            f"Too many changed lines ({total_lines}). Please limit to "
            f"{limits.max_changed_lines} lines or paste a focused diff."
        )


def prioritize_files(files: Iterable[FileChange], limit: int = NOTABLE_FILES) -> List[FileChange]:
    """Most review-worthy files first (code before docs), stable within a type."""
    return sorted(files, key=lambda f: _TYPE_PRIORITY[f.type])[:limit]


def analyze(
    files: Sequence[FileChange],
    pr: Optional[PRMeta] = None,
    config: Optional[PRManagerConfig] = None,
) -> AnalysisResult:
    """Check limits, then score *files* and derive hotspots."""
    config = config or PRManagerConfig()
    start = time.perf_counter()
    check_limits(files, config)

    pr = pr or PRMeta.for_pasted_diff()
    stats = calculate_stats(files, pr, config.scoring)
    hotspots = generate_hotspots(files, stats, config.scoring)
    level = risk_level(stats.risk_score_pre, config.scoring)
    elapsed = (time.perf_counter() - start) * 1000

    logger.debug(
        "Scored %d file(s): %d (%s), %d hotspot(s)",
        stats.total_files, stats.risk_score_pre, level, len(hotspots),
    )
    return AnalysisResult(
        pr=pr,
        stats=stats,
        files=list(files),
        hotspots=hotspots,
        risk_level=level,
        duration_ms=round(elapsed, 2),
    )


def analyze_diff(
    diff_text: str,
    config: Optional[PRManagerConfig] = None,
    registry: Optional[RuleRegistry] = None,
) -> AnalysisResult:
    """Analyse raw unified diff text."""
    config = config or PRManagerConfig()
    registry = registry or default_registry()
    raw_files = parse_diff(diff_text)
    logger.debug("Parsed %d file section(s) from diff", len(raw_files))
    changes = [
        file_builder.from_diff(raw, registry, redact=config.output.redact_secrets)
        for raw in raw_files
    ]
    return analyze(changes, PRMeta.for_pasted_diff(), config)


def analyze_pull_request(
    pr: PRMeta,
    gh_files: Iterable[GitHubFile],
    config: Optional[PRManagerConfig] = None,
    registry: Optional[RuleRegistry] = None,
) -> AnalysisResult:
    """Analyse files fetched from the GitHub PR-files API."""
    config = config or PRManagerConfig()
    registry = registry or default_registry()
    changes = [
        file_builder.from_github(f, registry, redact=config.output.redact_secrets)
        for f in gh_files
    ]
    return analyze(changes, pr, config)
