"""
Signal Rules — keyword table that turns requirement text into boolean signals.

Matching is a case-insensitive substring test: a signal is raised when any
of its keywords occurs anywhere in the text.  Note that the "data" set also
matches everyday wording ("data", "record"), so the data signal fires on most
inputs.  That behaviour is intentional and kept for output compatibility.
"""

from __future__ import annotations

import logging
from typing import Mapping

from req_analyzer.models.enums import Signal
from req_analyzer.models.schemas import Signals

logger = logging.getLogger(__name__)


SIGNAL_KEYWORDS: Mapping[Signal, tuple[str, ...]] = {
    Signal.SECURITY: ("security", "auth", "secure", "mfa"),
    Signal.DATA: ("database", "sql", "data", "record"),
    Signal.WEB: ("portal", "web", "ui", "interface"),
    Signal.HIGH_TRAFFIC: ("concurrent", "users", "performance", "scale"),
    Signal.FINANCIAL: ("bank", "transfer", "payment", "statement"),
}


def contains_any(text_lower: str, keywords: tuple[str, ...]) -> bool:
    """True if any keyword is a substring of the already lower-cased text."""
    return any(keyword in text_lower for keyword in keywords)


class SignalRules:
    """Detects the domain signals present in a requirement text."""

    def __init__(self, keywords: Mapping[Signal, tuple[str, ...]] | None = None):
        self._keywords = dict(SIGNAL_KEYWORDS if keywords is None else keywords)

    def detect(self, text: str) -> Signals:
        text_lower = text.lower()
        flags = {
            signal.value: contains_any(text_lower, self._keywords.get(signal, ()))
            for signal in Signal
        }
        signals = Signals(**flags)
        logger.debug(f"[SIGNALS] {signals.model_dump()}")
        return signals
