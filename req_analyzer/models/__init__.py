"""Enums and frozen schemas for the requirement analysis record."""

from .enums import Priority, Complexity, Signal, AnalysisStatus, SessionEvent
from .schemas import (
    Signals,
    RequirementItem,
    ValidationRule,
    ErrorScenario,
    TaskModule,
    AutomationLogic,
    RequirementAnalysis,
)

__all__ = [
    "Priority",
    "Complexity",
    "Signal",
    "AnalysisStatus",
    "SessionEvent",
    "Signals",
    "RequirementItem",
    "ValidationRule",
    "ErrorScenario",
    "TaskModule",
    "AutomationLogic",
    "RequirementAnalysis",
]
