"""Report renderers — Rich terminal and JSON."""

from prmanager.output import json_report, terminal

__all__ = ["json_report", "terminal"]
