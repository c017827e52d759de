"""
Role Rules — maps role keywords to canonical user role labels.

Roles are appended in table order, not in the order they appear in the
text, and several roles can match the same input.
"""

from __future__ import annotations

import logging

from req_analyzer.rules.signals import contains_any

logger = logging.getLogger(__name__)

DEFAULT_ROLE = "Standard Authenticated User"

ROLE_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("System Administrator", ("admin",)),
    ("End Customer", ("customer", "client")),
    ("Operations Manager", ("manager", "supervisor")),
    ("Guest User", ("guest", "anonymous")),
)


class RoleRules:
    """Extracts user roles from requirement text."""

    def __init__(
        self,
        table: tuple[tuple[str, tuple[str, ...]], ...] = ROLE_KEYWORDS,
        default_role: str = DEFAULT_ROLE,
    ):
        self._table = table
        self._default_role = default_role

    def extract(self, text: str) -> tuple[str, ...]:
        text_lower = text.lower()
        roles = tuple(
            role for role, keywords in self._table
            if contains_any(text_lower, keywords)
        )
        if not roles:
            logger.debug(f"[ROLES] No role keywords found, using '{self._default_role}'")
            return (self._default_role,)

        logger.debug(f"[ROLES] {list(roles)}")
        return roles
