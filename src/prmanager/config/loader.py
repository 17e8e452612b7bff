"""Load and merge configuration from .prmanager.toml and env vars."""

from __future__ import annotations

import dataclasses
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from prmanager.config.schema import (
    AnalyzeConfig,
    OutputConfig,
    PRManagerConfig,
    RulesConfig,
    ScoringConfig,
)

CONFIG_FILENAME = ".prmanager.toml"

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(repo_root: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = repo_root / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _int_env(name: str) -> Optional[int]:
    val = os.environ.get(name)
    if not val:
        return None
    try:
        return int(val)
    except ValueError:
        logger.warning("Ignoring non-integer %s=%r", name, val)
        return None


def _merge_env_overrides(cfg: PRManagerConfig) -> None:
    """Apply PRMANAGER_* environment variable overrides."""
    if val := os.environ.get("PRMANAGER_FAIL_ON"):
        if val in ("never", "low", "medium", "high"):
            cfg.analyze.fail_on = val  # type: ignore[assignment]
    if val := os.environ.get("PRMANAGER_FORMAT"):
        if val in ("terminal", "json"):
            cfg.output.format = val  # type: ignore[assignment]
    if val := os.environ.get("PRMANAGER_DISABLE_RULES"):
        cfg.rules.disable.extend(r.strip() for r in val.split(",") if r.strip())
    if (n := _int_env("PRMANAGER_MAX_FILES")) is not None:
        cfg.analyze.max_files = n
    if (n := _int_env("PRMANAGER_MAX_CHANGED_LINES")) is not None:
        cfg.analyze.max_changed_lines = n


_TYPE_NAMES = {bool: "a boolean", int: "an integer", str: "a string", list: "a list of strings"}

_CHOICES: Dict[Tuple[str, str], Tuple[str, ...]] = {
    ("analyze", "fail_on"): ("never", "low", "medium", "high"),
    ("output", "format"): ("terminal", "json"),
}


def _check_value(section: str, key: str, value: Any, default: Any) -> None:
    """Raise ConfigError unless *value* has the same shape as *default*."""
    where = f"[{section}] {key}"
    if isinstance(default, bool):
        ok = isinstance(value, bool)
    elif isinstance(default, int):
        ok = isinstance(value, int) and not isinstance(value, bool)
    elif isinstance(default, list):
        ok = isinstance(value, list) and all(isinstance(v, str) for v in value)
    else:
        ok = isinstance(value, type(default))
    if not ok:
        expected = _TYPE_NAMES.get(type(default), type(default).__name__)
        raise ConfigError(f"{where} must be {expected}, got {value!r}")

    choices = _CHOICES.get((section, key))
    if choices and value not in choices:
        raise ConfigError(f"{where} must be one of {', '.join(choices)}, got {value!r}")


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    raw = data.get(section, {})
    if not isinstance(raw, dict):
        raise ConfigError(f"[{section}] must be a table")
    defaults = cls()
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    unknown = set(raw) - valid_fields
    if unknown:
        logger.debug("Ignoring unknown keys in [%s]: %s", section, ", ".join(sorted(unknown)))
    filtered = {k: v for k, v in raw.items() if k in valid_fields}
    for key, value in filtered.items():
        _check_value(section, key, value, getattr(defaults, key))
    return cls(**filtered)


def load_config(
    repo_root: Path,
    config_override: Optional[str] = None,
) -> PRManagerConfig:
    """Load, validate, and return a PRManagerConfig."""
    config_path = find_config_file(repo_root, config_override)

    if config_path is None:
        cfg = PRManagerConfig()
    else:
        logger.debug("Loading config from %s", config_path)
        raw = _parse_toml(config_path)
        cfg = PRManagerConfig(
            version=raw.get("version", "1.0"),
            analyze=_build_section(raw, AnalyzeConfig, "analyze"),
            output=_build_section(raw, OutputConfig, "output"),
            scoring=_build_section(raw, ScoringConfig, "scoring"),
            rules=_build_section(raw, RulesConfig, "rules"),
        )

    _merge_env_overrides(cfg)
    return cfg
