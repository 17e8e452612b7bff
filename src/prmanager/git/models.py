"""Data models for diff parsing."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RawFileDiff:
    """One file section of a unified diff."""

    path: str
    additions: int = 0
    deletions: int = 0
    patch_snippet: str = ""
    is_binary: bool = False
