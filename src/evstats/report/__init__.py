"""Text reporting for evstats."""

from evstats.report.console import main, render_report

__all__ = ["main", "render_report"]
