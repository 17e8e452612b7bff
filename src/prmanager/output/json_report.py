"""JSON reporter for CI pipelines and API consumers."""

from __future__ import annotations

import json
from dataclasses import asdict
from typing import Any, Dict, List

from prmanager.heuristics.models import AnalysisResult

REPORT_VERSION = "1.0"


def to_dict(result: AnalysisResult) -> Dict[str, Any]:
    """Convert AnalysisResult to a JSON-serialisable dict."""
    stats = result.stats
    files_list: List[Dict[str, Any]] = []
    for f in result.files:
        files_list.append({
            "path": f.path,
            "type": f.type.value,
            "lang": f.language,
            "additions": f.additions,
            "deletions": f.deletions,
            "flags": [flag.value for flag in f.flags],
            "patch_snippet": f.patch_snippet,
            **({"status": f.status} if f.status else {}),
            **({"previous_path": f.previous_path} if f.previous_path else {}),
        })

    return {
        "version": REPORT_VERSION,
        "pr_meta": {k: v for k, v in asdict(result.pr).items() if v is not None},
        "stats": {
            "total_files": stats.total_files,
            "additions": stats.additions,
            "deletions": stats.deletions,
            "risk_score_pre": stats.risk_score_pre,
            "touched_areas": [area.value for area in stats.touched_areas],
            "has_tests_changed": stats.has_tests_changed,
            "deps_major_bump": stats.deps_major_bump,
            "has_migrations": stats.has_migrations,
            "pr_body_present": stats.pr_body_present,
        },
        "risk_level": result.risk_level,
        "hotspots": result.hotspots,
        "files": files_list,
        "duration_ms": result.duration_ms,
    }


def render(result: AnalysisResult) -> str:
    """Return formatted JSON string."""
    return json.dumps(to_dict(result), indent=2)
