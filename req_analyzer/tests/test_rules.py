"""
Tests: Signal and role rule tables.

Run with:
    pytest req_analyzer/tests/test_rules.py -v
"""

import pytest
from req_analyzer.models.enums import Signal
from req_analyzer.rules.roles import RoleRules, DEFAULT_ROLE
from req_analyzer.rules.signals import SignalRules, SIGNAL_KEYWORDS


class TestSignalRules:
    def test_empty_text_raises_nothing(self):
        signals = SignalRules().detect("")
        assert signals.model_dump() == {
            "security": False,
            "data": False,
            "web": False,
            "high_traffic": False,
            "financial": False,
        }

    @pytest.mark.parametrize("signal", list(Signal))
    def test_every_keyword_triggers_its_signal(self, signal):
        rules = SignalRules()
        for keyword in SIGNAL_KEYWORDS[signal]:
            signals = rules.detect(f"The {keyword.upper()} piece")
            assert getattr(signals, signal.value) is True, keyword

    def test_matching_is_case_insensitive(self):
        signals = SignalRules().detect("BANK Portal with MFA")
        assert signals.financial and signals.web and signals.security

    def test_substring_match_inside_words(self):
        # "authentication" contains "auth", "statements" contains "statement"
        signals = SignalRules().detect("authentication for statements")
        assert signals.security is True
        assert signals.financial is True

    def test_data_keyword_false_positive_is_preserved(self):
        # "metadata" contains "data"
        signals = SignalRules().detect("show the metadata")
        assert signals.data is True

    def test_custom_table(self):
        rules = SignalRules({Signal.WEB: ("dashboard",)})
        signals = rules.detect("a dashboard for the web")
        assert signals.web is True
        assert signals.security is False


class TestRoleRules:
    def test_fallback_role(self):
        assert RoleRules().extract("Nothing role related here.") == (DEFAULT_ROLE,)
        assert DEFAULT_ROLE == "Standard Authenticated User"

    def test_fixed_order_regardless_of_text_order(self):
        roles = RoleRules().extract("The customer talks to the admin.")
        assert roles == ("System Administrator", "End Customer")

    def test_all_roles(self):
        roles = RoleRules().extract("anonymous supervisor, client and administrator")
        assert roles == (
            "System Administrator",
            "End Customer",
            "Operations Manager",
            "Guest User",
        )

    def test_synonyms_map_to_one_label(self):
        roles = RoleRules().extract("client and customer")
        assert roles == ("End Customer",)

    def test_uppercase_keywords(self):
        assert RoleRules().extract("GUEST checkout") == ("Guest User",)
