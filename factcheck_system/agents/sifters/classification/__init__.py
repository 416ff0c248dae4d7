"""Classification components for claim analyses.

- ClaimClassifier: verdict vote, confidence extraction, red flags and
  supporting points over free-text model output
"""

from factcheck_system.agents.sifters.classification.claim_classifier import ClaimClassifier

__all__ = ["ClaimClassifier"]
