"""Source quality scoring for search results.

Rates a set of SourceRecords on a 0-100 scale from three signals:
- Count: how many sources were found (+30 / +20 / +10)
- Reliability: +15 per source on the reliable-domain allow-list
- Diversity: +20 when every source has its own host, +10 for partial diversity

The score is clamped to 100. Every rule that fires adds one finding to the
report, in the order above, so output is deterministic for a given set.

The hostname helpers at module level are shared with the claim classifier.
"""

import re
from typing import Iterable, Optional, Sequence
from urllib.parse import urlsplit

from factcheck_system.config.logging import get_logger
from factcheck_system.config.source_reliability import (
    MAX_QUALITY_SCORE,
    QUALITY_WEIGHTS,
    RELIABLE_DOMAINS,
    SOURCE_COUNT_SCORES,
    SUSPICIOUS_HOST_PATTERNS,
)
from factcheck_system.data_management.schemas import SourceQualityReport, SourceRecord
from factcheck_system.utils.urls import clean_redirect_url

_SUSPICIOUS_REGEXES = tuple(re.compile(p, re.IGNORECASE) for p in SUSPICIOUS_HOST_PATTERNS)


def extract_hostname(url: str) -> Optional[str]:
    """
    Extract the lowercase hostname from a URL.

    DuckDuckGo redirect links are unwrapped first, so the host is the target's.

    Args:
        url: Source URL

    Returns:
        Hostname (``www.`` kept), or None when the URL has no parseable host
    """
    if not url:
        return None
    try:
        return urlsplit(clean_redirect_url(url.strip())).hostname or None
    except ValueError:
        # urlsplit raises on malformed netlocs such as "http://[::1"
        return None


def is_reliable_domain(
    url: str,
    reliable_domains: Iterable[str] = RELIABLE_DOMAINS,
) -> bool:
    """Whether the URL's host contains an allow-listed domain."""
    hostname = extract_hostname(url)
    if hostname is None:
        return False
    return any(domain in hostname for domain in reliable_domains)


def is_suspicious_domain(
    url: str,
    patterns: Sequence[re.Pattern] = _SUSPICIOUS_REGEXES,
) -> bool:
    """Whether the URL's host looks questionable. Malformed URLs are suspicious."""
    hostname = extract_hostname(url)
    if hostname is None:
        return True
    return any(pattern.search(hostname) for pattern in patterns)


def count_reliable_sources(
    sources: Sequence[SourceRecord],
    reliable_domains: Iterable[str] = RELIABLE_DOMAINS,
) -> int:
    """Count sources whose host is on the reliable-domain allow-list."""
    domains = tuple(reliable_domains)
    return sum(1 for source in sources if is_reliable_domain(source.url, domains))


class SourceQualityScorer:
    """
    Computes a quality report for a set of search results.

    Usage:
        scorer = SourceQualityScorer()
        report = scorer.analyze(sources)
        report.score, report.details

    Attributes:
        reliable_domains: Allow-list of higher-trust domains (substring match)
    """

    def __init__(self, reliable_domains: Optional[Iterable[str]] = None):
        """
        Initialize scorer with a reliable-domain allow-list.

        Args:
            reliable_domains: Custom allow-list (uses defaults if None)
        """
        self.reliable_domains = tuple(reliable_domains) if reliable_domains is not None else RELIABLE_DOMAINS
        self.logger = get_logger("SourceQualityScorer")

    def analyze(self, sources: Sequence[SourceRecord]) -> SourceQualityReport:
        """
        Score a set of sources.

        Args:
            sources: Search results to rate (order does not matter)

        Returns:
            SourceQualityReport with the clamped score and one finding per rule fired
        """
        if not sources:
            return SourceQualityReport(score=0, details=["❌ Nenhuma fonte encontrada"])

        details: list[str] = []
        score = 0

        # 1. Count
        count = len(sources)
        score += self._count_score(count)
        if count >= 3:
            details.append(f"✅ Múltiplas fontes encontradas ({count})")
        elif count == 2:
            details.append(f"⚠️ Poucas fontes encontradas ({count})")
        else:
            details.append("❌ Apenas uma fonte encontrada")

        # 2. Reliability
        reliable_count = count_reliable_sources(sources, self.reliable_domains)
        if reliable_count > 0:
            score += reliable_count * QUALITY_WEIGHTS["reliable_source"]
            details.append(f"✅ {reliable_count} fonte(s) de alta confiabilidade")

        # 3. Diversity
        unique_hosts = len(self._distinct_hosts(sources))
        if unique_hosts == count:
            score += QUALITY_WEIGHTS["fully_diverse"]
            details.append("✅ Fontes de domínios diversos")
        elif unique_hosts > 1:
            score += QUALITY_WEIGHTS["partially_diverse"]
            details.append(f"⚠️ Alguma diversidade ({unique_hosts} domínios diferentes)")

        score = max(0, min(score, MAX_QUALITY_SCORE))

        self.logger.debug(
            f"Source quality computed: {score}",
            sources=count,
            reliable=reliable_count,
            unique_hosts=unique_hosts,
        )

        return SourceQualityReport(score=score, details=details)

    def _count_score(self, count: int) -> int:
        for minimum, points in SOURCE_COUNT_SCORES:
            if count >= minimum:
                return points
        return 0

    def _distinct_hosts(self, sources: Sequence[SourceRecord]) -> set[str]:
        """Hostnames of the sources; a URL without a host stands in for itself."""
        return {extract_hostname(source.url) or source.url for source in sources}


__all__ = [
    "SourceQualityScorer",
    "extract_hostname",
    "is_reliable_domain",
    "is_suspicious_domain",
    "count_reliable_sources",
]
