"""
Content catalog — the fixed design fragments the classifier assembles.

Conditional fragments are grouped by the signal that enables them; the
classifier decides which groups to include and in what order.
"""

from __future__ import annotations

from req_analyzer.models.schemas import (
    ErrorScenario,
    RequirementItem,
    TaskModule,
    ValidationRule,
)


# ── Data validation rules ────────────────────────────────

BASELINE_VALIDATION_RULES = (
    ValidationRule(field="Identity Token", rule="Must be a valid JWT with active session state."),
)

FINANCIAL_VALIDATION_RULES = (
    ValidationRule(
        field="Transaction Amount",
        rule="Must be a positive decimal; exceeding daily limit requires multi-step approval.",
    ),
    ValidationRule(field="Account Identifier", rule="Must match IBAN or internal routing format."),
)

SECURITY_VALIDATION_RULES = (
    ValidationRule(
        field="Auth Credentials",
        rule="Passwords must meet enterprise complexity (min 12 chars, alphanumeric, symbols).",
    ),
)


# ── Error handling ───────────────────────────────────────

BASELINE_ERROR_SCENARIOS = (
    ErrorScenario(
        case="Service Timeout",
        resolution="Implement circuit breaker pattern and 3-step exponential backoff.",
    ),
    ErrorScenario(
        case="Database Deadlock",
        resolution="Log transaction ID, rollback state, and notify the health monitoring endpoint.",
    ),
)

SECURITY_ERROR_SCENARIOS = (
    ErrorScenario(
        case="Invalid MFA Token",
        resolution="Lock attempt for 5 minutes after 3 failures; notify security auditor.",
    ),
)


# ── Requirements ─────────────────────────────────────────

FUNCTIONAL_REQUIREMENTS = (
    RequirementItem(
        title="Workflow Orchestration",
        description="Coordinate the state transitions for the core business process described.",
    ),
    RequirementItem(
        title="Audit Trail Generation",
        description="Generate immutable logs for every user action to satisfy compliance requirements.",
    ),
)

AVAILABILITY_HIGH_TRAFFIC = "Target 99.99% uptime with active-active regional failover."
AVAILABILITY_STANDARD = "Standard 99.9% availability within business hours."

DATA_SOVEREIGNTY = RequirementItem(
    title="Data Sovereignty",
    description="Ensure data at rest is encrypted using AES-256 and keys are managed via HSM.",
)


# ── Task breakdown ───────────────────────────────────────

TASK_BREAKDOWN = (
    TaskModule(
        module="Gateway & Auth",
        description="Entry point handling rate limiting, authentication, and request routing.",
        api_endpoints=("POST /auth/token", "POST /auth/mfa/challenge"),
        database_requirements="Redis for session caching; PostgreSQL for user metadata.",
    ),
    TaskModule(
        module="Business Engine",
        description="Domain layer containing the core logic and service implementations.",
        api_endpoints=("GET /domain/list", "POST /domain/process"),
        database_requirements="Relational schema with ACID compliance for transaction safety.",
    ),
)


# ── Tech stack ───────────────────────────────────────────

HIGH_TRAFFIC_TECH_STACK = ("Java 21", "Spring Boot 3", "Redis", "Kafka", "AWS EKS", "Terraform")
STANDARD_TECH_STACK = ("Java", "Spring Boot", "PostgreSQL", "React", "Docker")


# ── Risk flags ───────────────────────────────────────────

RISK_CONCURRENCY = "Concurrent Request Contention"
RISK_REGULATORY = "Regulatory Compliance Risk"
RISK_KEY_MANAGEMENT = "Key Management Overhead"
RISK_NONE = "Standard Implementation"


# ── Effort (hours) ───────────────────────────────────────

EFFORT_FINANCIAL = 160
EFFORT_HIGH_TRAFFIC = 120
EFFORT_STANDARD = 80


BEST_PRACTICES = (
    "Implement OpenTelemetry for distributed tracing.",
    "Adhere to OWASP Top 10 security standards.",
    "Utilize Blue/Green deployment strategies for zero-downtime.",
)
