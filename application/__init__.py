"""
Application layer: Use cases and workflow orchestration.

This layer coordinates between domain logic and infrastructure,
implementing the theme-analysis report and theme-page workflows.
"""

from application.reporting import (
    assemble_report,
    generate_recommendations,
    log_report_summary,
    tag_frequency_table,
)
from application.serialize import save_report
from application.theme_pages import generate_all_theme_pages, render_theme_page

__all__ = [
    # Main workflows
    "assemble_report",
    "log_report_summary",
    "save_report",
    "generate_all_theme_pages",
    # Building blocks
    "generate_recommendations",
    "tag_frequency_table",
    "render_theme_page",
]
