"""Patch truncation for API-sourced file diffs."""

from __future__ import annotations

MAX_PATCH_LINES = 300
MAX_PATCH_CHARS = 8000
TRUNCATION_MARKER = "\n... [truncated]"


def truncate_patch(patch: str) -> str:
    """Keep at most ``MAX_PATCH_LINES`` lines and ``MAX_PATCH_CHARS`` characters."""
    if not patch:
        return ""
    lines = patch.split("\n")
    if len(lines) <= MAX_PATCH_LINES and len(patch) <= MAX_PATCH_CHARS:
        return patch
    result = "\n".join(lines[:MAX_PATCH_LINES])
    if len(result) > MAX_PATCH_CHARS:
        result = result[:MAX_PATCH_CHARS] + TRUNCATION_MARKER
    return result
