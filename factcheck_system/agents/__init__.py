"""Fact-check agents."""

from factcheck_system.agents.sifters import ClaimClassifier, SourceQualityScorer

__all__ = ["ClaimClassifier", "SourceQualityScorer"]
