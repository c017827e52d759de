"""
AnalysisSession — caller-side holder of one pending or finished analysis.

The classifier is stateless; serializing submissions is this object's job.
Each submission gets a ticket, and a result or failure only lands if its
ticket is still current, so a reset while analyzing discards the late result
instead of resurrecting it.
"""

from __future__ import annotations

import asyncio
import logging
import threading
import uuid
from typing import Optional

from req_analyzer.models.enums import AnalysisStatus, SessionEvent
from req_analyzer.models.schemas import RequirementAnalysis
from req_analyzer.orchestration.transitions import next_status
from req_analyzer.services.analysis_service import AnalysisFailure, AnalysisService

logger = logging.getLogger(__name__)


class AnalysisSession:
    def __init__(self, session_id: str | None = None):
        self.session_id = session_id or f"SES-{uuid.uuid4().hex[:8].upper()}"
        self.status = AnalysisStatus.IDLE
        self.result: Optional[RequirementAnalysis] = None
        self.error_message: Optional[str] = None
        self._ticket = 0
        self._lock = threading.Lock()

    # ── Events ───────────────────────────────────────────

    def begin(self) -> int:
        """Apply *submit*; returns the ticket the outcome must present."""
        with self._lock:
            self.status = next_status(self.status, SessionEvent.SUBMIT)
            self.error_message = None
            self._ticket += 1
            logger.info(f"[{self.session_id}] submit → {self.status.value} (ticket {self._ticket})")
            return self._ticket

    def complete(self, ticket: int, result: RequirementAnalysis) -> bool:
        with self._lock:
            if not self._is_current(ticket):
                return False
            self.status = next_status(self.status, SessionEvent.SUCCESS)
            self.result = result
            logger.info(f"[{self.session_id}] success → {self.status.value}")
            return True

    def fail(self, ticket: int, message: str) -> bool:
        with self._lock:
            if not self._is_current(ticket):
                return False
            self.status = next_status(self.status, SessionEvent.FAILURE)
            self.error_message = message
            logger.warning(f"[{self.session_id}] failure → {self.status.value}: {message}")
            return True

    def reset(self) -> None:
        with self._lock:
            self.status = next_status(self.status, SessionEvent.RESET)
            self.result = None
            self.error_message = None
            # invalidate any in-flight ticket
            self._ticket += 1
            logger.info(f"[{self.session_id}] reset → {self.status.value}")

    def _is_current(self, ticket: int) -> bool:
        if ticket != self._ticket or self.status != AnalysisStatus.ANALYZING:
            logger.debug(f"[{self.session_id}] Discarding stale outcome for ticket {ticket}")
            return False
        return True

    # ── Driver ───────────────────────────────────────────

    async def submit(self, text: str, service: AnalysisService) -> AnalysisStatus:
        """Run one analysis through *service* and record its outcome."""
        ticket = self.begin()
        try:
            result = await service.analyze(text)
        except AnalysisFailure as e:
            self.fail(ticket, e.message)
        except asyncio.CancelledError:
            self.fail(ticket, "Analysis cancelled.")
            raise
        else:
            self.complete(ticket, result)
        return self.status

    def snapshot(self) -> dict:
        return {
            "session_id": self.session_id,
            "status": self.status.value,
            "error_message": self.error_message,
            "result": self.result.model_dump(mode="json", by_alias=True) if self.result else None,
        }
