"""Rule tables — signal keywords, role keywords and the fixed content catalog."""

from req_analyzer.rules.signals import SignalRules, SIGNAL_KEYWORDS
from req_analyzer.rules.roles import RoleRules, ROLE_KEYWORDS, DEFAULT_ROLE

__all__ = ["SignalRules", "SIGNAL_KEYWORDS", "RoleRules", "ROLE_KEYWORDS", "DEFAULT_ROLE"]
