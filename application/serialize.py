"""Report serialization utilities."""

import json
import logging
from pathlib import Path

from domain.schemas import AnalysisReport

logger = logging.getLogger(__name__)


def save_report(report: AnalysisReport, report_path: Path) -> Path:
    """Write the analysis report as indented UTF-8 JSON and return its path."""
    report_path.parent.mkdir(parents=True, exist_ok=True)
    with report_path.open("w", encoding="utf-8") as f:
        json.dump(report.model_dump(mode="json"), f, ensure_ascii=False, indent=2)

    logger.info("Saved theme analysis report: %s", report_path)
    return report_path
