"""Sifters that turn search results and model output into verdicts.

- SourceQualityScorer: rates a set of sources (credibility)
- ClaimClassifier: verdict, confidence, red flags and supporting points (classification)
- ClaimVerifier, WebSearchChat, SearchAnalyzer, SearchDecisionStep: capability-driven
  pipelines (verification)
"""

from factcheck_system.agents.sifters.classification import ClaimClassifier
from factcheck_system.agents.sifters.credibility import SourceQualityScorer

__all__ = [
    "ClaimClassifier",
    "SourceQualityScorer",
]
