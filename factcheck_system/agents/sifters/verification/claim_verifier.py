"""Claim verification orchestrator.

Verification flow per claim:
1. Validate the claim (InvalidClaimError on blank input)
2. Search for "fact check: <claim>" (failures degrade to no sources)
3. Score source quality (SourceQualityScorer)
4. Ask the model for an analysis grounded on the numbered sources
5. Classify the analysis (ClaimClassifier)
6. Append alert and positive-point blocks to the explanation

Zero sources is a valid, degraded path: the verdict still carries a status.

Usage:
    from factcheck_system.agents.sifters.verification import ClaimVerifier

    verifier = ClaimVerifier(search=search_capability, chat=chat_capability)
    verdict = await verifier.verify("Vacinas causam autismo")
"""

from typing import Optional, Sequence

from factcheck_system.agents.sifters.classification import ClaimClassifier
from factcheck_system.agents.sifters.credibility import SourceQualityScorer
from factcheck_system.agents.sifters.verification.source_formatting import format_sources
from factcheck_system.config.prompts import CLAIM_VERIFICATION_PROMPT, FACT_CHECK_SYSTEM_PROMPT
from factcheck_system.config.settings import settings
from factcheck_system.data_management.schemas import (
    ChatRole,
    ChatTurn,
    ClaimVerdict,
    SearchQuery,
    SourceRecord,
)
from factcheck_system.exceptions import InvalidClaimError, ProcessingError
from factcheck_system.llm.capabilities import ChatCapability, SearchCapability
from factcheck_system.utils.logging import get_correlation_id, get_structured_logger

QUERY_PREFIX = "fact check: "
ALERTS_HEADER = "**⚠️ Alertas:**"
POSITIVES_HEADER = "**✅ Pontos positivos:**"


def compose_explanation(
    analysis: str,
    red_flags: Sequence[str],
    supporting_points: Sequence[str],
) -> str:
    """Append the alert and positive-point blocks that are non-empty."""
    explanation = analysis
    if red_flags:
        explanation += f"\n\n{ALERTS_HEADER}\n" + "\n".join(red_flags)
    if supporting_points:
        explanation += f"\n\n{POSITIVES_HEADER}\n" + "\n".join(supporting_points)
    return explanation


class ClaimVerifier:
    """Verifies a single claim against web sources.

    Search failures never abort a verification; chat failures do, as
    ProcessingError with the technical cause chained.
    """

    def __init__(
        self,
        search: SearchCapability,
        chat: ChatCapability,
        scorer: Optional[SourceQualityScorer] = None,
        classifier: Optional[ClaimClassifier] = None,
        query_max_length: Optional[int] = None,
    ) -> None:
        """Initialize ClaimVerifier.

        Args:
            search: Search capability.
            chat: Chat capability.
            scorer: Source quality scorer. Created if not provided.
            classifier: Analysis classifier. Created if not provided.
            query_max_length: Search query limit. Defaults to settings.
        """
        self.search = search
        self.chat = chat
        self.scorer = scorer or SourceQualityScorer()
        self.classifier = classifier or ClaimClassifier()
        self.query_max_length = (
            query_max_length if query_max_length is not None else settings.search_query_max_length
        )
        self._logger = get_structured_logger(__name__, component="ClaimVerifier")

    def build_query(self, claim: str) -> SearchQuery:
        """Search query for a claim, truncated to the query length limit."""
        text = f"{QUERY_PREFIX}{claim}"[: self.query_max_length]
        return SearchQuery.create(text, max_length=self.query_max_length)

    async def verify(self, claim: str) -> ClaimVerdict:
        """Verify a claim and return a structured verdict.

        Args:
            claim: Claim text as submitted by the user.

        Returns:
            ClaimVerdict with status, confidence, sources and annotated explanation.

        Raises:
            InvalidClaimError: The claim is empty or blank.
            ProcessingError: The chat capability failed.
        """
        text = (claim or "").strip()
        if not text:
            raise InvalidClaimError()

        log = self._logger.bind(correlation_id=get_correlation_id())
        query = self.build_query(text)
        log.info("verification_started", claim=text[:80])

        sources = await self._gather_sources(query, log)
        quality = self.scorer.analyze(sources)

        prompt = CLAIM_VERIFICATION_PROMPT.format(
            claim=text,
            sources=format_sources(sources),
            quality_score=quality.score,
            quality_details="\n".join(quality.details),
        )

        try:
            analysis_text = await self.chat.chat(
                [ChatTurn(role=ChatRole.USER, content=prompt)],
                context=FACT_CHECK_SYSTEM_PROMPT,
            )
        except Exception as e:
            log.error("verification_chat_failed", error=str(e))
            raise ProcessingError() from e

        analysis = self.classifier.analyze(analysis_text, sources)

        verdict = ClaimVerdict(
            claim=text,
            status=analysis.status,
            explanation=compose_explanation(
                analysis_text, analysis.red_flags, analysis.supporting_points
            ),
            sources=list(sources),
            confidence=analysis.confidence,
            red_flags=analysis.red_flags,
            supporting_points=analysis.supporting_points,
            source_quality=quality,
        )

        log.info(
            "verification_complete",
            status=verdict.status.value,
            confidence=verdict.confidence,
            sources=len(sources),
            quality_score=quality.score,
        )
        return verdict

    async def _gather_sources(self, query: SearchQuery, log) -> list[SourceRecord]:
        try:
            sources = await self.search.search(str(query))
        except Exception as e:
            log.warning("search_failed", query=str(query)[:80], error=str(e))
            return []

        log.debug("search_executed", results=len(sources))
        return list(sources)


__all__ = ["ClaimVerifier", "compose_explanation", "QUERY_PREFIX"]
