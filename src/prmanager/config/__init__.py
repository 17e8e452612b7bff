"""Configuration loading, schema, and defaults."""

from prmanager.config.loader import ConfigError, load_config
from prmanager.config.schema import (
    PRManagerConfig,
    RiskLevel,
    ScoringConfig,
    risk_at_or_above,
)

__all__ = [
    "ConfigError",
    "PRManagerConfig",
    "RiskLevel",
    "ScoringConfig",
    "load_config",
    "risk_at_or_above",
]
