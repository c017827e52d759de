"""Rule-based requirement analyzer: free text in, technical design out."""

from req_analyzer.classifier import RequirementClassifier, classify
from req_analyzer.models.schemas import RequirementAnalysis

__all__ = ["RequirementClassifier", "classify", "RequirementAnalysis"]
