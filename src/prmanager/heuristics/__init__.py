"""Risk heuristics — classification, stats, scoring, hotspots."""

from prmanager.heuristics.deps import has_major_bump
from prmanager.heuristics.engine import (
    AnalysisLimitError,
    analyze,
    analyze_diff,
    analyze_pull_request,
    check_limits,
    prioritize_files,
)
from prmanager.heuristics.files import classify, file_flags
from prmanager.heuristics.hotspots import MAX_HOTSPOTS, generate_hotspots
from prmanager.heuristics.models import AnalysisResult, FileChange, PRMeta, Stats
from prmanager.heuristics.scoring import calculate_stats, risk_level, risk_score

__all__ = [
    "MAX_HOTSPOTS",
    "AnalysisLimitError",
    "AnalysisResult",
    "FileChange",
    "PRMeta",
    "Stats",
    "analyze",
    "analyze_diff",
    "analyze_pull_request",
    "calculate_stats",
    "check_limits",
    "classify",
    "file_flags",
    "generate_hotspots",
    "has_major_bump",
    "prioritize_files",
    "risk_level",
    "risk_score",
]
