"""Turn raw diff sections and GitHub file records into ``FileChange``."""

from __future__ import annotations

from typing import List, Optional

from prmanager.git.language import language_from_path
from prmanager.git.models import RawFileDiff
from prmanager.github.patch import truncate_patch
from prmanager.github.models import GitHubFile
from prmanager.heuristics.models import FileChange
from prmanager.redaction import redact_secrets
from prmanager.rules.models import FileFacts, FileType, Flag
from prmanager.rules.registry import RuleRegistry, default_registry


def classify(path: str, registry: Optional[RuleRegistry] = None) -> FileType:
    """Return the file type of *path* (first matching rule wins)."""
    return (registry or default_registry()).classify(path)


def file_flags(
    path: str,
    additions: int = 0,
    deletions: int = 0,
    patch: str = "",
    status: Optional[str] = None,
    registry: Optional[RuleRegistry] = None,
) -> List[Flag]:
    facts = FileFacts(path, additions, deletions, patch, status)
    return (registry or default_registry()).flags_for(facts)


def from_diff(
    raw: RawFileDiff,
    registry: Optional[RuleRegistry] = None,
    *,
    redact: bool = True,
) -> FileChange:
    """Build a FileChange from a parsed diff section."""
    return FileChange(
        path=raw.path,
        type=classify(raw.path, registry),
        language=language_from_path(raw.path),
        additions=raw.additions,
        deletions=raw.deletions,
        flags=file_flags(
            raw.path, raw.additions, raw.deletions, raw.patch_snippet, registry=registry
        ),
        patch_snippet=redact_secrets(raw.patch_snippet) if redact else raw.patch_snippet,
    )


def from_github(
    gh_file: GitHubFile,
    registry: Optional[RuleRegistry] = None,
    *,
    redact: bool = True,
) -> FileChange:
    """Build a FileChange from a PR-files API record.

    Flags look at the full patch; only the stored snippet is truncated.
    """
    snippet = truncate_patch(gh_file.patch)
    return FileChange(
        path=gh_file.filename,
        type=classify(gh_file.filename, registry),
        language=language_from_path(gh_file.filename),
        additions=gh_file.additions,
        deletions=gh_file.deletions,
        flags=file_flags(
            gh_file.filename,
            gh_file.additions,
            gh_file.deletions,
            gh_file.patch,
            gh_file.status,
            registry=registry,
        ),
        patch_snippet=redact_secrets(snippet) if redact else snippet,
        status=gh_file.status,
        previous_path=gh_file.previous_filename,
    )
