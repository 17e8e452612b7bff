"""Configuration schema — dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal

RiskLevel = Literal["Low", "Medium", "High"]
FailOn = Literal["never", "low", "medium", "high"]

RISK_ORDER: dict[str, int] = {
    "low": 0,
    "medium": 1,
    "high": 2,
}


def risk_at_or_above(level: str, threshold: str) -> bool:
    """Return True if risk *level* is at or above *threshold*.

    A threshold of ``never`` never trips.
    """
    if threshold == "never":
        return False
    return RISK_ORDER.get(level.lower(), 0) >= RISK_ORDER.get(threshold, 0)


@dataclass
class AnalyzeConfig:
    fail_on: FailOn = "high"  # exit 1 when the risk level is at or above this
    max_files: int = 100
    max_changed_lines: int = 6000


@dataclass
class OutputConfig:
    format: Literal["terminal", "json"] = "terminal"
    show_files: bool = True
    redact_secrets: bool = True


@dataclass
class ScoringConfig:
    """Weights and thresholds of the risk score.

    Defaults are the production values; override under ``[scoring]``.
    """

    large_additions: int = 2000
    large_files: int = 50
    large_weight: int = 30
    medium_additions: int = 800
    medium_files: int = 25
    medium_weight: int = 15
    sensitive_weight: int = 25  # auth or payment
    db_weight: int = 15
    db_without_tests_weight: int = 10
    major_bump_weight: int = 20
    many_deps_files: int = 5
    many_deps_weight: int = 10
    config_weight: int = 10
    public_api_weight: int = 10
    code_without_tests_weight: int = 15
    min_body_length: int = 20
    missing_body_weight: int = 5
    cleanup_with_tests_credit: int = 10
    low_risk_only_credit: int = 15
    high_level: int = 60
    medium_level: int = 30


@dataclass
class RulesConfig:
    disable: List[str] = field(default_factory=list)


@dataclass
class PRManagerConfig:
    version: str = "1.0"
    analyze: AnalyzeConfig = field(default_factory=AnalyzeConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    scoring: ScoringConfig = field(default_factory=ScoringConfig)
    rules: RulesConfig = field(default_factory=RulesConfig)
