"""
Analysis Service — the submission boundary between callers and the classifier.

Callers get either a complete RequirementAnalysis or an AnalysisFailure with
a human-readable message.  Nothing is retried and no partial result is ever
returned, so the caller can always resubmit.
"""

from __future__ import annotations

import asyncio
import logging
import time

from req_analyzer.classifier import RequirementClassifier
from req_analyzer.config import get_settings
from req_analyzer.models.schemas import RequirementAnalysis

logger = logging.getLogger(__name__)

GENERIC_FAILURE_MESSAGE = "Failed to analyze requirements. Please try again."


class AnalysisFailure(Exception):
    """A submission that produced no analysis."""

    def __init__(self, message: str = ""):
        self.message = message or GENERIC_FAILURE_MESSAGE
        super().__init__(self.message)


class AnalysisService:
    """Runs the classifier behind an awaitable, failure-wrapping call."""

    def __init__(
        self,
        classifier: RequirementClassifier | None = None,
        latency_seconds: float | None = None,
    ):
        self.classifier = classifier or RequirementClassifier()
        if latency_seconds is None:
            latency_seconds = get_settings().simulated_latency_seconds
        self.latency_seconds = latency_seconds

    async def analyze(self, text: str) -> RequirementAnalysis:
        """Analyze *text*; raises AnalysisFailure if anything goes wrong."""
        t0 = time.perf_counter()
        try:
            if self.latency_seconds > 0:
                await asyncio.sleep(self.latency_seconds)
            result = self.classifier.classify(text)
        except asyncio.CancelledError:
            logger.warning("[ANALYSIS] Submission cancelled")
            raise
        except Exception as e:
            logger.error(f"[ANALYSIS] Failed after {time.perf_counter() - t0:.3f}s: {e}")
            raise AnalysisFailure(str(e)) from e

        logger.info(f"[ANALYSIS] Completed in {time.perf_counter() - t0:.3f}s")
        return result

    def analyze_sync(self, text: str) -> RequirementAnalysis:
        """Blocking variant for scripts and the CLI."""
        return asyncio.run(self.analyze(text))
