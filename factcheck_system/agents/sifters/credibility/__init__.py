"""Credibility scoring components for search results.

- SourceQualityScorer: count + reliability + diversity score for a source set
- Hostname helpers shared with the claim classifier
"""

from factcheck_system.agents.sifters.credibility.source_scorer import (
    SourceQualityScorer,
    count_reliable_sources,
    extract_hostname,
    is_reliable_domain,
    is_suspicious_domain,
)

__all__ = [
    "SourceQualityScorer",
    "count_reliable_sources",
    "extract_hostname",
    "is_reliable_domain",
    "is_suspicious_domain",
]
