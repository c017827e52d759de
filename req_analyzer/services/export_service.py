"""
Export Service — renders a RequirementAnalysis as the plain-text
Technical Design Document offered for download.

The section layout is a compatibility contract with previously exported
documents: headers, underline lengths, bullet format and blank lines must
stay exactly as they are.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Iterable

from req_analyzer.config import get_settings
from req_analyzer.models.schemas import RequirementAnalysis, TaskModule

logger = logging.getLogger(__name__)

_DOCUMENT_TEMPLATE = """
TECHNICAL DESIGN DOCUMENT
=========================
Project Summary: {summary}
Business Priority: {priority}
Estimated Complexity: {complexity}
Effort: {effort} Hours

USER ROLES
----------
{roles}

FUNCTIONAL REQUIREMENTS
-----------------------
{functional}

NON-FUNCTIONAL REQUIREMENTS
---------------------------
{non_functional}

DATA VALIDATION RULES
---------------------
{validation}

ERROR HANDLING
--------------
{errors}

TECHNICAL TASKS
---------------
{tasks}

TECH STACK
----------
{tech_stack}

BEST PRACTICES
--------------
{best_practices}
"""


def _bullets(pairs: Iterable[tuple[str, str]]) -> str:
    return "\n".join(f"- {label}: {text}" for label, text in pairs)


def _task_block(task: TaskModule) -> str:
    return (
        f"\nModule: {task.module}\n"
        f"Description: {task.description}\n"
        f"APIs: {', '.join(task.api_endpoints)}\n"
        f"Database: {task.database_requirements}\n"
    )


def render_design_document(analysis: RequirementAnalysis) -> str:
    """Serialize *analysis* into the fixed-layout text document."""
    logic = analysis.automation_logic
    content = _DOCUMENT_TEMPLATE.format(
        summary=analysis.summary,
        priority=analysis.business_priority.value,
        complexity=logic.estimated_complexity.value,
        effort=logic.suggested_effort_hours,
        roles="\n".join(analysis.user_roles),
        functional=_bullets((r.title, r.description) for r in analysis.functional_requirements),
        non_functional=_bullets((r.title, r.description) for r in analysis.non_functional_requirements),
        validation=_bullets((v.field, v.rule) for v in analysis.data_validation_rules),
        errors=_bullets((e.case, e.resolution) for e in analysis.error_handling_scenarios),
        tasks="\n".join(_task_block(t) for t in analysis.task_breakdown),
        tech_stack=", ".join(analysis.tech_stack),
        best_practices="\n".join(analysis.best_practices),
    )
    return content.strip()


def export_filename(now: datetime | None = None) -> str:
    """Download name for an exported document, stamped with epoch milliseconds."""
    now = now or datetime.now(timezone.utc)
    prefix = get_settings().export_filename_prefix
    return f"{prefix}_{int(now.timestamp() * 1000)}.txt"
