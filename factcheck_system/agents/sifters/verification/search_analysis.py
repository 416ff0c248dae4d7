"""Sourced synthesis of a search topic."""

from typing import Optional

from factcheck_system.agents.sifters.credibility import SourceQualityScorer
from factcheck_system.agents.sifters.verification.source_formatting import format_sources
from factcheck_system.config.prompts import SEARCH_ANALYSIS_PROMPT, SEARCH_ANALYSIS_SYSTEM_PROMPT
from factcheck_system.config.settings import settings
from factcheck_system.data_management.schemas import (
    ChatRole,
    ChatTurn,
    SearchAnalysis,
    SearchQuery,
)
from factcheck_system.exceptions import NoSearchResultsError, ProcessingError
from factcheck_system.llm.capabilities import ChatCapability, SearchCapability
from factcheck_system.utils.logging import get_correlation_id, get_structured_logger


class SearchAnalyzer:
    """Searches a topic and asks the model to summarize and weigh the sources.

    Unlike claim verification, an analysis without sources has nothing to
    say: zero results raise NoSearchResultsError.
    """

    def __init__(
        self,
        search: SearchCapability,
        chat: ChatCapability,
        scorer: Optional[SourceQualityScorer] = None,
    ) -> None:
        self.search = search
        self.chat = chat
        self.scorer = scorer or SourceQualityScorer()
        self._logger = get_structured_logger(__name__, component="SearchAnalyzer")

    async def analyze(self, query: str) -> SearchAnalysis:
        """Analyze what the web says about ``query``.

        Raises:
            InvalidQueryError: The query is blank or too long.
            NoSearchResultsError: The search found nothing (or failed).
            ProcessingError: The chat capability failed.
        """
        search_query = SearchQuery.create(query, max_length=settings.search_query_max_length)
        log = self._logger.bind(correlation_id=get_correlation_id())

        try:
            sources = list(await self.search.search(str(search_query)))
        except Exception as e:
            log.warning("search_failed", query=str(search_query)[:80], error=str(e))
            sources = []

        if not sources:
            log.info("search_analysis_no_results", query=str(search_query)[:80])
            raise NoSearchResultsError()

        quality = self.scorer.analyze(sources)
        prompt = SEARCH_ANALYSIS_PROMPT.format(
            query=str(search_query),
            sources=format_sources(sources),
        )

        try:
            analysis = await self.chat.chat(
                [ChatTurn(role=ChatRole.USER, content=prompt)],
                context=SEARCH_ANALYSIS_SYSTEM_PROMPT,
            )
        except Exception as e:
            log.error("search_analysis_chat_failed", error=str(e))
            raise ProcessingError() from e

        log.info("search_analysis_complete", sources=len(sources), quality_score=quality.score)
        return SearchAnalysis(
            query=str(search_query),
            analysis=analysis,
            sources=sources,
            source_quality=quality,
        )


__all__ = ["SearchAnalyzer"]
