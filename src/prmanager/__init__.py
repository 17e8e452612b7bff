"""PR Manager — heuristic risk analysis for pull requests."""

__version__ = "0.3.0"
