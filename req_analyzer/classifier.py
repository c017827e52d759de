"""
Requirement Classifier — turns free-text requirements into a technical design.

The classifier is a pure function of its input: keyword signals and role
matches are computed from the lower-cased text, then rule tables from
``req_analyzer.rules`` are assembled in a fixed order.  It has no error path
and accepts any string, including an empty one.
"""

from __future__ import annotations

import logging

from req_analyzer.models.enums import Complexity, Priority
from req_analyzer.models.schemas import (
    AutomationLogic,
    RequirementAnalysis,
    RequirementItem,
    Signals,
)
from req_analyzer.rules import catalog
from req_analyzer.rules.roles import RoleRules
from req_analyzer.rules.signals import SignalRules

logger = logging.getLogger(__name__)


class RequirementClassifier:
    """Heuristic, keyword-driven requirement analyzer."""

    def __init__(
        self,
        signal_rules: SignalRules | None = None,
        role_rules: RoleRules | None = None,
    ):
        self.signal_rules = signal_rules or SignalRules()
        self.role_rules = role_rules or RoleRules()

    def classify(self, text: str) -> RequirementAnalysis:
        signals = self.signal_rules.detect(text)
        roles = self.role_rules.extract(text)

        analysis = RequirementAnalysis(
            summary=build_summary(signals),
            business_priority=derive_priority(signals),
            functional_requirements=catalog.FUNCTIONAL_REQUIREMENTS,
            non_functional_requirements=build_non_functional(signals),
            user_roles=roles,
            data_validation_rules=build_validation_rules(signals),
            error_handling_scenarios=build_error_scenarios(signals),
            task_breakdown=catalog.TASK_BREAKDOWN,
            tech_stack=(
                catalog.HIGH_TRAFFIC_TECH_STACK if signals.high_traffic
                else catalog.STANDARD_TECH_STACK
            ),
            automation_logic=AutomationLogic(
                estimated_complexity=derive_complexity(signals),
                risk_flags=build_risk_flags(signals),
                suggested_effort_hours=derive_effort_hours(signals),
            ),
            best_practices=catalog.BEST_PRACTICES,
        )

        logger.debug(
            f"[CLASSIFIER] {len(text)} chars → priority={analysis.business_priority.value} "
            f"complexity={analysis.automation_logic.estimated_complexity.value} "
            f"effort={analysis.automation_logic.suggested_effort_hours}h"
        )
        return analysis


# ── Derivations ──────────────────────────────────────────


def build_summary(signals: Signals) -> str:
    domain = "financial-grade" if signals.financial else "standard enterprise"
    delivery = "digital platform" if signals.web else "backend service"
    driver = (
        "scalability and high availability" if signals.high_traffic
        else "data integrity and modularity"
    )
    security = " within a zero-trust security architecture" if signals.security else ""
    return (
        f"Requirement detected as a {domain} {delivery}. "
        f"The system prioritizes {driver}{security}."
    )


def derive_priority(signals: Signals) -> Priority:
    # Priority.LOW is never selected by the current rules
    if signals.high_traffic or signals.security or signals.financial:
        return Priority.HIGH
    return Priority.MEDIUM


def derive_complexity(signals: Signals) -> Complexity:
    if (signals.high_traffic and signals.security) or signals.financial:
        return Complexity.HIGH
    return Complexity.MEDIUM


def derive_effort_hours(signals: Signals) -> int:
    if signals.financial:
        return catalog.EFFORT_FINANCIAL
    if signals.high_traffic:
        return catalog.EFFORT_HIGH_TRAFFIC
    return catalog.EFFORT_STANDARD


def build_validation_rules(signals: Signals) -> tuple:
    rules = list(catalog.BASELINE_VALIDATION_RULES)
    if signals.financial:
        rules.extend(catalog.FINANCIAL_VALIDATION_RULES)
    if signals.security:
        rules.extend(catalog.SECURITY_VALIDATION_RULES)
    return tuple(rules)


def build_error_scenarios(signals: Signals) -> tuple:
    scenarios = list(catalog.BASELINE_ERROR_SCENARIOS)
    if signals.security:
        scenarios.extend(catalog.SECURITY_ERROR_SCENARIOS)
    return tuple(scenarios)


def build_non_functional(signals: Signals) -> tuple:
    availability = RequirementItem(
        title="Availability",
        description=(
            catalog.AVAILABILITY_HIGH_TRAFFIC if signals.high_traffic
            else catalog.AVAILABILITY_STANDARD
        ),
    )
    return (availability, catalog.DATA_SOVEREIGNTY)


def build_risk_flags(signals: Signals) -> tuple[str, ...]:
    flags: list[str] = []
    if signals.high_traffic:
        flags.append(catalog.RISK_CONCURRENCY)
    if signals.financial:
        flags.append(catalog.RISK_REGULATORY)
    # Exactly one of these two always closes the list
    flags.append(catalog.RISK_KEY_MANAGEMENT if signals.security else catalog.RISK_NONE)
    return tuple(flags)


# ── Convenience ──────────────────────────────────────────

_default_classifier = RequirementClassifier()


def classify(text: str) -> RequirementAnalysis:
    """Classify *text* with the default rule tables."""
    return _default_classifier.classify(text)
