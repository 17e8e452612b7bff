"""Major version bump detection over dependency manifest patches.

Only textually adjacent removed/added lines are compared, so a bump whose
old and new lines are separated by other diff lines is not detected.
"""

from __future__ import annotations

import re
from typing import Iterable

from prmanager.heuristics.models import FileChange
from prmanager.rules.models import FileType

# -  "lodash": "^3.10.1"
# +  "lodash": "^4.0.0"
_NPM_BUMP_RE = re.compile(
    r'-\s*"[^"]+"\s*:\s*"[\^~]?(\d+)\.\d+\.\d+".*\n'
    r'\+\s*"[^"]+"\s*:\s*"[\^~]?(\d+)\.\d+\.\d+"'
)

# -requests==2.31.0
# +requests==3.0.0
_PIP_BUMP_RE = re.compile(
    r"-([a-zA-Z0-9_-]+)==(\d+)\.\d+\.\d+.*\n\+\1==(\d+)\.\d+\.\d+"
)


def patch_has_major_bump(patch: str) -> bool:
    for m in _NPM_BUMP_RE.finditer(patch):
        if int(m.group(2)) > int(m.group(1)):
            return True
    for m in _PIP_BUMP_RE.finditer(patch):
        if int(m.group(3)) > int(m.group(2)):
            return True
    return False


def has_major_bump(files: Iterable[FileChange]) -> bool:
    """True if any ``deps`` file raises a dependency's major version."""
    return any(
        patch_has_major_bump(f.patch_snippet) for f in files if f.type == FileType.DEPS
    )
