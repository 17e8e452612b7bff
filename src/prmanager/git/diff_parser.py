"""Unified diff parser — one forward scan, one record per file.

Additions and deletions are counted over the whole file section, while the
retained patch text is capped at ``MAX_PATCH_LINES`` lines. Malformed input
never raises: lines outside a ``diff --git`` section are ignored.
"""

from __future__ import annotations

import re
from typing import List, Optional

from prmanager.git.models import RawFileDiff

MAX_PATCH_LINES = 300

_DIFF_HEADER_RE = re.compile(r"^diff --git a/(.+) b/(.+)")
_BINARY_RE = re.compile(r"Binary files .* differ")


class _FileBuffer:
    """Accumulates one file section while scanning."""

    __slots__ = ("path", "additions", "deletions", "lines", "is_binary")

    def __init__(self, path: str, header: str) -> None:
        self.path = path
        self.additions = 0
        self.deletions = 0
        self.lines: List[str] = [header]
        self.is_binary = False

    def keep(self, line: str) -> None:
        if len(self.lines) < MAX_PATCH_LINES:
            self.lines.append(line)

    def finish(self) -> RawFileDiff:
        return RawFileDiff(
            path=self.path,
            additions=self.additions,
            deletions=self.deletions,
            patch_snippet="\n".join(self.lines),
            is_binary=self.is_binary,
        )


class DiffParser:
    """Parse unified diff text into per-file ``RawFileDiff`` records.

    Usage::

        files = DiffParser(diff_text).parse()
    """

    def __init__(self, diff_text: str) -> None:
        # split, not splitlines: line endings are kept as-is
        self._lines = diff_text.split("\n")

    def parse(self) -> List[RawFileDiff]:
        files: List[RawFileDiff] = []
        current: Optional[_FileBuffer] = None

        for line in self._lines:
            # --- diff --git header → new file context ---
            if line.startswith("diff --git"):
                if current is not None:
                    files.append(current.finish())
                m = _DIFF_HEADER_RE.match(line)
                current = _FileBuffer(m.group(2), line) if m else None
                continue

            if current is None:
                continue

            # --- file and hunk headers: kept, not counted ---
            if line.startswith(("---", "+++", "@@")):
                current.keep(line)
            elif _BINARY_RE.search(line):
                current.is_binary = True
                current.keep(line)
            elif line.startswith("+"):
                current.additions += 1
                current.keep(line)
            elif line.startswith("-"):
                current.deletions += 1
                current.keep(line)
            elif line.startswith(" ") or not line.strip():
                current.keep(line)

        if current is not None:
            files.append(current.finish())
        return files


def parse_diff(diff_text: str) -> List[RawFileDiff]:
    """Shortcut for ``DiffParser(diff_text).parse()``."""
    return DiffParser(diff_text).parse()
