"""Rule data model — ordered type rules and independent flag rules.

Match criteria are stored as plain string lists so rules stay serialisable
(custom rules are loaded from YAML). A flag rule may additionally carry a
``predicate`` callable for checks that are not keyword lookups.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, NamedTuple, Optional


class FileType(str, Enum):
    CODE = "code"
    TEST = "test"
    DEPS = "deps"
    CONFIG = "config"
    DB = "db"
    INFRA = "infra"
    DOCS = "docs"


class Flag(str, Enum):
    TOUCHES_AUTH = "touches_auth"
    TOUCHES_PAYMENT = "touches_payment"
    DELETES_GT_ADDITIONS = "deletes_gt_additions"
    CHANGES_PUBLIC_API = "changes_public_api"
    IS_RENAME = "is_rename"


class FileFacts(NamedTuple):
    """What a flag rule gets to look at for one file."""

    path: str
    additions: int = 0
    deletions: int = 0
    patch: str = ""
    status: Optional[str] = None


@dataclass
class TypeRule:
    """Assigns ``file_type`` when the lower-cased path matches any criterion.

    ``filenames`` is compared against the last path segment only.
    """

    id: str
    file_type: FileType
    description: str = ""
    contains: Optional[List[str]] = None
    prefixes: Optional[List[str]] = None
    suffixes: Optional[List[str]] = None
    filenames: Optional[List[str]] = None

    def matches(self, path: str) -> bool:
        lower = path.lower()
        if self.contains and any(s in lower for s in self.contains):
            return True
        if self.prefixes and lower.startswith(tuple(self.prefixes)):
            return True
        if self.suffixes and lower.endswith(tuple(self.suffixes)):
            return True
        if self.filenames and lower.rsplit("/", 1)[-1] in self.filenames:
            return True
        return False


@dataclass
class FlagRule:
    """Adds ``flag`` when any of its criteria holds for a file."""

    id: str
    flag: Flag
    description: str = ""
    path_keywords: Optional[List[str]] = None
    patch_keywords: Optional[List[str]] = None
    statuses: Optional[List[str]] = None
    predicate: Optional[Callable[[FileFacts], bool]] = None

    def matches(self, facts: FileFacts) -> bool:
        if self.path_keywords:
            lower = facts.path.lower()
            if any(k in lower for k in self.path_keywords):
                return True
        if self.patch_keywords and facts.patch:
            if any(k in facts.patch for k in self.patch_keywords):
                return True
        if self.statuses and facts.status in self.statuses:
            return True
        if self.predicate is not None and self.predicate(facts):
            return True
        return False
