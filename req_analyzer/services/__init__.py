"""Services — AnalysisService (submission boundary) and the text exporter."""

from req_analyzer.services.analysis_service import (
    AnalysisService,
    AnalysisFailure,
    GENERIC_FAILURE_MESSAGE,
)
from req_analyzer.services.export_service import render_design_document, export_filename

__all__ = [
    "AnalysisService",
    "AnalysisFailure",
    "GENERIC_FAILURE_MESSAGE",
    "render_design_document",
    "export_filename",
]
