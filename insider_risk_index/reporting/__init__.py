"""Reporting package — JSON and Markdown outputs."""

from .json_export import export_json
from .summary_report import export_summary, render_summary

__all__ = ["export_json", "export_summary", "render_summary"]
