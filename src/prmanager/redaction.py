"""Secret masking for patch snippets that leave the process."""

from __future__ import annotations

import re
from typing import List, Pattern

REDACTED = "[REDACTED]"

# Each pattern either captures the secret in a 'secret' group or is masked whole.
_SECRET_PATTERNS: List[Pattern[str]] = [
    re.compile(r"(?P<secret>AKIA[0-9A-Z]{16})"),
    re.compile(r"(?P<secret>gh[pousr]_[A-Za-z0-9_]{36,255})"),
    re.compile(r"(?P<secret>glpat-[A-Za-z0-9\-_]{20,})"),
    re.compile(r"(?P<secret>xox[bporsca]-[0-9]{10,13}-[0-9]{10,13}[a-zA-Z0-9-]*)"),
    re.compile(r"(?P<secret>[sr]k_live_[A-Za-z0-9]{24,})"),
    re.compile(r"(?P<secret>eyJ[A-Za-z0-9_-]{10,}\.eyJ[A-Za-z0-9_-]{10,}\.[A-Za-z0-9_-]+)"),
    re.compile(
        r"-----BEGIN (?:[A-Z]+ )?PRIVATE KEY-----[\s\S]*?-----END (?:[A-Z]+ )?PRIVATE KEY-----"
    ),
    re.compile(
        r"(?i)(?:password|passwd|pwd|secret|api_key|apikey|api_secret|access_token|auth_token|token)"
        r"\s*[:=]\s*['\"](?P<secret>[^'\"\s]{8,})['\"]"
    ),
    re.compile(r"[a-z][a-z0-9+.-]*://[^:/\s@]+:(?P<secret>[^@\s]{4,})@"),
]


def _mask(match: re.Match[str]) -> str:
    if "secret" not in match.re.groupindex:
        return REDACTED
    start, end = match.span("secret")
    whole_start = match.start()
    text = match.group(0)
    return text[: start - whole_start] + REDACTED + text[end - whole_start:]


def redact_secrets(text: str) -> str:
    """Replace anything that looks like a credential with ``[REDACTED]``."""
    if not text:
        return text
    for pattern in _SECRET_PATTERNS:
        text = pattern.sub(_mask, text)
    return text
