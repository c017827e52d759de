"""
Transition table for an analysis session.

    idle ──submit──▶ analyzing ──success──▶ completed
                         │
                         └──failure──▶ error

completed and error accept a new submit; reset returns any state to idle.
A submit while analyzing is refused: one analysis is in flight per session.
"""

from __future__ import annotations

from req_analyzer.models.enums import AnalysisStatus, SessionEvent


class SessionError(Exception):
    """Base class for session state-machine errors."""


class InvalidTransitionError(SessionError):
    def __init__(self, status: AnalysisStatus, event: SessionEvent):
        self.status = status
        self.event = event
        super().__init__(f"Cannot '{event.value}' a session that is '{status.value}'")


class SessionBusyError(InvalidTransitionError):
    """Raised when a second submission arrives while one is pending."""


TRANSITIONS: dict[tuple[AnalysisStatus, SessionEvent], AnalysisStatus] = {
    (AnalysisStatus.IDLE, SessionEvent.SUBMIT): AnalysisStatus.ANALYZING,
    (AnalysisStatus.COMPLETED, SessionEvent.SUBMIT): AnalysisStatus.ANALYZING,
    (AnalysisStatus.ERROR, SessionEvent.SUBMIT): AnalysisStatus.ANALYZING,
    (AnalysisStatus.ANALYZING, SessionEvent.SUCCESS): AnalysisStatus.COMPLETED,
    (AnalysisStatus.ANALYZING, SessionEvent.FAILURE): AnalysisStatus.ERROR,
}


def next_status(status: AnalysisStatus, event: SessionEvent) -> AnalysisStatus:
    """Return the status reached by applying *event* in *status*."""
    if event == SessionEvent.RESET:
        return AnalysisStatus.IDLE

    target = TRANSITIONS.get((status, event))
    if target is not None:
        return target

    if status == AnalysisStatus.ANALYZING and event == SessionEvent.SUBMIT:
        raise SessionBusyError(status, event)
    raise InvalidTransitionError(status, event)
