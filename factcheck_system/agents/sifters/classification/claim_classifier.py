"""Rule-based classification of free-text claim analyses.

Turns the language model's analysis of a claim into structured signals:

| Operation                   | Mechanism                                              |
|-----------------------------|--------------------------------------------------------|
| extract_status              | Regex vote over a fixed (status, patterns) table       |
| extract_confidence          | Explicit "NN%" mention, else qualitative ladder, else 50 |
| identify_red_flags          | Independent Boolean checks on text and sources         |
| identify_supporting_points  | Independent Boolean checks on text and sources         |

All operations are pure functions of their inputs. Flags and points are
independent: any number of them can fire for the same text.
"""

import re
from typing import Optional, Sequence

from factcheck_system.agents.sifters.credibility.source_scorer import (
    count_reliable_sources,
    is_suspicious_domain,
)
from factcheck_system.config.classification_patterns import (
    CONFIDENCE_LADDER,
    DEFAULT_CONFIDENCE,
    EXPLICIT_CONFIDENCE_PATTERNS,
    FEW_SOURCES_FLAG,
    MIN_SOURCES_FOR_CROSS_CHECK,
    RED_FLAG_PHRASES,
    RELIABLE_SOURCES_POINT,
    STATUS_PATTERNS,
    STATUS_TIE_BREAK_ORDER,
    SUPPORTING_PATTERNS,
    SUSPICIOUS_SOURCES_FLAG,
)
from factcheck_system.config.logging import get_logger
from factcheck_system.config.source_reliability import RELIABLE_DOMAINS
from factcheck_system.data_management.schemas import (
    ClaimAnalysis,
    ClaimStatus,
    SourceRecord,
)


class ClaimClassifier:
    """
    Extracts verdict, confidence, red flags and supporting points from text.

    Status vote:
        Each match of each pattern adds one vote to its status. The status with
        the strictly highest total wins; no votes at all gives
        INSUFFICIENT_DATA. A tie at the maximum goes to the status listed first
        in ``tie_break_order`` (PARTIALLY_TRUE, FALSE, TRUE by default).

    Usage:
        classifier = ClaimClassifier()
        status = classifier.extract_status(analysis_text)
        analysis = classifier.analyze(analysis_text, sources)

    Example:
        >>> classifier = ClaimClassifier()
        >>> classifier.extract_status("A afirmação é parcialmente verdadeira.")
        <ClaimStatus.PARTIALLY_TRUE: 'partially_true'>
    """

    def __init__(
        self,
        tie_break_order: Sequence[ClaimStatus] = STATUS_TIE_BREAK_ORDER,
        min_sources: int = MIN_SOURCES_FOR_CROSS_CHECK,
        reliable_domains: Optional[Sequence[str]] = None,
    ):
        """
        Initialize classifier and pre-compile every pattern table.

        Args:
            tie_break_order: Status priority for ties at the maximum vote
            min_sources: Source count below which the few-sources flag fires
            reliable_domains: Custom reliable-domain allow-list (defaults if None)
        """
        voted = {status for status, _ in STATUS_PATTERNS}
        if set(tie_break_order) != voted:
            raise ValueError("tie_break_order must list every voting status exactly once")

        self.tie_break_order = tuple(tie_break_order)
        self.min_sources = min_sources
        self.reliable_domains = (
            tuple(reliable_domains) if reliable_domains is not None else RELIABLE_DOMAINS
        )

        self.status_patterns = [
            (status, [re.compile(p, re.IGNORECASE) for p in patterns])
            for status, patterns in STATUS_PATTERNS
        ]
        self.confidence_patterns = [
            re.compile(p, re.IGNORECASE) for p in EXPLICIT_CONFIDENCE_PATTERNS
        ]
        self.confidence_ladder = [
            (value, [re.compile(p, re.IGNORECASE) for p in phrases])
            for value, phrases in CONFIDENCE_LADDER
        ]
        self.supporting_patterns = [
            (point, re.compile(p, re.IGNORECASE)) for point, p in SUPPORTING_PATTERNS
        ]
        self._logger = get_logger("ClaimClassifier")

    def extract_status(self, text: str) -> ClaimStatus:
        """
        Decide the verdict expressed by an analysis text.

        Args:
            text: Free-text analysis

        Returns:
            One of the four ClaimStatus values, never None
        """
        votes = self.count_status_votes(text)
        best = max(votes.values())
        if best == 0:
            return ClaimStatus.INSUFFICIENT_DATA

        for status in self.tie_break_order:
            if votes[status] == best:
                return status

        return ClaimStatus.INSUFFICIENT_DATA

    def count_status_votes(self, text: str) -> dict[ClaimStatus, int]:
        """Votes per voting status (TRUE, FALSE, PARTIALLY_TRUE)."""
        text = text or ""
        return {
            status: sum(len(pattern.findall(text)) for pattern in patterns)
            for status, patterns in self.status_patterns
        }

    def extract_confidence(self, text: str) -> int:
        """
        Extract a 0-100 confidence level from an analysis text.

        Priority:
        1. First explicit numeric mention, clamped to 0-100
        2. First qualitative ladder bucket that matches (85/70/50/30/15)
        3. Default 50

        Args:
            text: Free-text analysis

        Returns:
            Confidence in [0, 100]
        """
        text = text or ""

        for pattern in self.confidence_patterns:
            match = pattern.search(text)
            if match:
                return max(0, min(int(match.group(1)), 100))

        for value, phrases in self.confidence_ladder:
            if any(phrase.search(text) for phrase in phrases):
                return value

        return DEFAULT_CONFIDENCE

    def identify_red_flags(self, text: str, sources: Sequence[SourceRecord]) -> list[str]:
        """
        Collect warning signs from the text and its sources.

        Checks, in order: too few sources; anonymous sources; conspiracy
        language; absolute language; viral misinformation phrasing; miracle
        cures; suspicious source hosts.

        Args:
            text: Free-text analysis (or the claim itself)
            sources: Sources the analysis relied on

        Returns:
            One flag string per check that fired
        """
        flags: list[str] = []
        lower = (text or "").lower()

        if len(sources) < self.min_sources:
            flags.append(FEW_SOURCES_FLAG)

        for flag, phrases in RED_FLAG_PHRASES:
            if any(phrase in lower for phrase in phrases):
                flags.append(flag)

        suspicious = sum(1 for source in sources if is_suspicious_domain(source.url))
        if suspicious > 0:
            flags.append(SUSPICIOUS_SOURCES_FLAG.format(count=suspicious))

        return flags

    def identify_supporting_points(
        self,
        text: str,
        sources: Sequence[SourceRecord],
    ) -> list[str]:
        """
        Collect signals that support the reliability of the analysis.

        Checks, in order: reliable sources present; experts cited; studies
        referenced; consensus; peer review; quantitative figures.

        Args:
            text: Free-text analysis
            sources: Sources the analysis relied on

        Returns:
            One point string per check that fired
        """
        points: list[str] = []

        reliable_count = count_reliable_sources(sources, self.reliable_domains)
        if reliable_count > 0:
            points.append(RELIABLE_SOURCES_POINT.format(count=reliable_count))

        text = text or ""
        for point, pattern in self.supporting_patterns:
            if pattern.search(text):
                points.append(point)

        return points

    def analyze(self, text: str, sources: Sequence[SourceRecord]) -> ClaimAnalysis:
        """Run all four extractions over one analysis text."""
        result = ClaimAnalysis(
            status=self.extract_status(text),
            confidence=self.extract_confidence(text),
            red_flags=self.identify_red_flags(text, sources),
            supporting_points=self.identify_supporting_points(text, sources),
        )

        self._logger.debug(
            "Claim analysis classified",
            status=result.status.value,
            confidence=result.confidence,
            red_flags=len(result.red_flags),
            supporting_points=len(result.supporting_points),
        )

        return result


__all__ = ["ClaimClassifier"]
