"""Git interface layer — adapter, diff parsing, language tags, models."""

from prmanager.git.adapter import (
    GitError,
    get_range_diff,
    get_repo_root,
    get_staged_diff,
)
from prmanager.git.diff_parser import MAX_PATCH_LINES, DiffParser, parse_diff
from prmanager.git.language import language_from_path
from prmanager.git.models import RawFileDiff

__all__ = [
    "MAX_PATCH_LINES",
    "DiffParser",
    "GitError",
    "RawFileDiff",
    "get_range_diff",
    "get_repo_root",
    "get_staged_diff",
    "language_from_path",
    "parse_diff",
]
