"""Session state machine: idle → analyzing → completed | error, reset to idle."""

from req_analyzer.orchestration.session import AnalysisSession
from req_analyzer.orchestration.transitions import (
    next_status,
    SessionError,
    SessionBusyError,
    InvalidTransitionError,
)

__all__ = [
    "AnalysisSession",
    "next_status",
    "SessionError",
    "SessionBusyError",
    "InvalidTransitionError",
]
