"""Rule engine — models, registry, built-in rules."""

from prmanager.rules.models import FileFacts, FileType, Flag, FlagRule, TypeRule
from prmanager.rules.registry import (
    RuleError,
    RuleRegistry,
    build_registry,
    default_registry,
)

__all__ = [
    "FileFacts",
    "FileType",
    "Flag",
    "FlagRule",
    "RuleError",
    "RuleRegistry",
    "TypeRule",
    "build_registry",
    "default_registry",
]
