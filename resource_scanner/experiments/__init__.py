"""Experiments layer: scan surveys and their CLI."""

from resource_scanner.experiments.survey import ScanRecord, run_scan_survey, summarize_survey

__all__ = [
    "ScanRecord",
    "run_scan_survey",
    "summarize_survey",
]
