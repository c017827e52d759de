"""
Schemas for the requirement analysis record.

Every model is frozen: a RequirementAnalysis is built once per classification
and never mutated afterwards.  Attributes are snake_case in Python and
serialize to the camelCase keys the frontend and export tooling expect
(use ``model_dump(by_alias=True)``).
"""

from __future__ import annotations

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from .enums import Priority, Complexity


class _Record(BaseModel):
    model_config = {
        "frozen": True,
        "alias_generator": to_camel,
        "populate_by_name": True,
    }


# ── Intermediate ─────────────────────────────────────────


class Signals(_Record):
    """Keyword-derived flags that drive conditional content."""
    security: bool = False
    data: bool = False
    web: bool = False
    high_traffic: bool = False
    financial: bool = False


# ── Record parts ─────────────────────────────────────────


class RequirementItem(_Record):
    title: str
    description: str


class ValidationRule(_Record):
    field: str
    rule: str


class ErrorScenario(_Record):
    case: str
    resolution: str


class TaskModule(_Record):
    """A proposed implementation module with its interface and storage notes."""
    module: str
    description: str
    api_endpoints: tuple[str, ...] = ()
    database_requirements: str = ""


class AutomationLogic(_Record):
    estimated_complexity: Complexity = Complexity.MEDIUM
    risk_flags: tuple[str, ...] = ()
    suggested_effort_hours: int = 0


# ── Output ───────────────────────────────────────────────


class RequirementAnalysis(_Record):
    """Structured technical design produced from one requirement text."""
    summary: str
    business_priority: Priority
    functional_requirements: tuple[RequirementItem, ...]
    non_functional_requirements: tuple[RequirementItem, ...]
    user_roles: tuple[str, ...]
    data_validation_rules: tuple[ValidationRule, ...]
    error_handling_scenarios: tuple[ErrorScenario, ...]
    task_breakdown: tuple[TaskModule, ...]
    tech_stack: tuple[str, ...]
    automation_logic: AutomationLogic
    best_practices: tuple[str, ...]
