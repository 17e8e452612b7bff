"""Rule registry — loads built-in and custom rules, applies config filters."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional, Set

import yaml

from prmanager.config.schema import PRManagerConfig
from prmanager.rules.models import FileFacts, FileType, Flag, FlagRule, TypeRule

CUSTOM_RULES_DIR = ".prmanager-rules"

logger = logging.getLogger(__name__)


class RuleError(Exception):
    """Raised when a custom rule file is malformed."""


class RuleRegistry:
    """Ordered type rules plus independent flag rules.

    Custom type rules are evaluated before the built-in ones, in load order.
    """

    def __init__(self) -> None:
        self._type_rules: List[TypeRule] = []
        self._custom_type_count = 0
        self._flag_rules: Dict[str, FlagRule] = {}
        self._disabled: Set[str] = set()

    # ---- registration ----

    def register_type_rule(self, rule: TypeRule, *, custom: bool = False) -> None:
        if custom:
            self._type_rules.insert(self._custom_type_count, rule)
            self._custom_type_count += 1
        else:
            self._type_rules.append(rule)

    def register_flag_rule(self, rule: FlagRule) -> None:
        self._flag_rules[rule.id] = rule

    def disable(self, rule_id: str) -> None:
        self._disabled.add(rule_id)

    # ---- queries ----

    def type_rules(self) -> List[TypeRule]:
        return [r for r in self._type_rules if r.id not in self._disabled]

    def flag_rules(self) -> List[FlagRule]:
        return [r for r in self._flag_rules.values() if r.id not in self._disabled]

    def classify(self, path: str) -> FileType:
        """Return the type of the first matching rule, ``code`` otherwise."""
        for rule in self.type_rules():
            if rule.matches(path):
                return rule.file_type
        return FileType.CODE

    def flags_for(self, facts: FileFacts) -> List[Flag]:
        """Return the flags of every matching flag rule, without duplicates."""
        flags: List[Flag] = []
        for rule in self.flag_rules():
            if rule.flag not in flags and rule.matches(facts):
                flags.append(rule.flag)
        return flags

    # ---- config filtering ----

    def apply_config(self, config: PRManagerConfig) -> None:
        for rule_id in config.rules.disable:
            self.disable(rule_id)

    # ---- custom rule loading ----

    def load_custom_rules(self, directory: Path) -> int:
        """Load YAML rule files from *directory*. Returns count loaded."""
        count = 0
        if not directory.is_dir():
            return 0
        for path in sorted(directory.iterdir()):
            if path.suffix in (".yaml", ".yml"):
                count += self._load_yaml_rules(path)
        logger.debug("Loaded %d custom rule(s) from %s", count, directory)
        return count

    def _load_yaml_rules(self, path: Path) -> int:
        with open(path, encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as exc:
                raise RuleError(f"Failed to parse {path}: {exc}") from exc
        if data is None:
            return 0
        if not isinstance(data, list):
            data = [data]
        count = 0
        for entry in data:
            try:
                self._register_entry(entry)
            except (KeyError, TypeError, ValueError) as exc:
                raise RuleError(f"Invalid rule in {path}: {exc!r}") from exc
            count += 1
        return count

    def _register_entry(self, entry: Dict[str, Any]) -> None:
        if not isinstance(entry, dict):
            raise ValueError(f"rule must be a mapping, got {entry!r}")
        if "type" in entry:
            self.register_type_rule(
                TypeRule(
                    id=entry["id"],
                    file_type=FileType(entry["type"]),
                    description=entry.get("description", ""),
                    contains=_lowered(_string_list(entry, "contains")),
                    prefixes=_lowered(_string_list(entry, "prefixes")),
                    suffixes=_lowered(_string_list(entry, "suffixes")),
                    filenames=_lowered(_string_list(entry, "filenames")),
                ),
                custom=True,
            )
        elif "flag" in entry:
            self.register_flag_rule(
                FlagRule(
                    id=entry["id"],
                    flag=Flag(entry["flag"]),
                    description=entry.get("description", ""),
                    path_keywords=_lowered(_string_list(entry, "path_keywords")),
                    patch_keywords=_string_list(entry, "patch_keywords"),
                    statuses=_string_list(entry, "statuses"),
                )
            )
        else:
            raise ValueError(f"rule {entry.get('id')!r} needs a 'type' or 'flag' key")


def _string_list(entry: Dict[str, Any], key: str) -> Optional[List[str]]:
    values = entry.get(key)
    if values is None:
        return None
    if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
        raise ValueError(f"rule {entry.get('id')!r}: '{key}' must be a list of strings")
    return values


def _lowered(values: Optional[List[str]]) -> Optional[List[str]]:
    if values is None:
        return None
    return [str(v).lower() for v in values]


def _builtin_registry() -> RuleRegistry:
    from prmanager.rules.builtin import ALL_FLAG_RULES, ALL_TYPE_RULES

    registry = RuleRegistry()
    for type_rule in ALL_TYPE_RULES:
        registry.register_type_rule(type_rule)
    for flag_rule in ALL_FLAG_RULES:
        registry.register_flag_rule(flag_rule)
    return registry


@lru_cache(maxsize=None)
def default_registry() -> RuleRegistry:
    """Registry with the built-in rules only. Shared; do not mutate."""
    return _builtin_registry()


def build_registry(config: PRManagerConfig, repo_root: Optional[Path] = None) -> RuleRegistry:
    """Create a fully populated, config-filtered rule registry."""
    registry = _builtin_registry()
    if repo_root is not None:
        registry.load_custom_rules(repo_root / CUSTOM_RULES_DIR)
    registry.apply_config(config)
    return registry
