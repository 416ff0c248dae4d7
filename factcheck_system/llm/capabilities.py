"""Narrow capability contracts for the language model and web search.

The verification pipeline never talks to a provider SDK directly. It receives
a ChatCapability and a SearchCapability at construction time; production
wiring passes provider adapters, tests pass AsyncMock fakes.

Both contracts are async. Timeouts and retries are the adapter's concern;
a timeout surfaces as an ordinary exception.
"""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from factcheck_system.config.logging import get_logger
from factcheck_system.data_management.schemas import ChatTurn, SourceRecord


class ChatCapability(ABC):
    """Generates a reply for an ordered conversation."""

    @abstractmethod
    async def chat(
        self,
        turns: Sequence[ChatTurn],
        context: Optional[str] = None,
        images: Optional[Sequence[str]] = None,
    ) -> str:
        """
        Produce the assistant reply.

        Args:
            turns: Conversation turns, oldest first
            context: System-level instructions prepended by the adapter
            images: Optional image URLs attached to the last user turn

        Returns:
            Reply text

        Raises:
            Exception: Any provider failure or timeout
        """
        pass


class SearchCapability(ABC):
    """Returns web results for a query."""

    @abstractmethod
    async def search(self, query: str) -> list[SourceRecord]:
        """
        Run a web search.

        Args:
            query: Search text

        Returns:
            Results in provider ranking order (possibly empty)

        Raises:
            Exception: Any provider failure or timeout
        """
        pass


class FallbackSearch(SearchCapability):
    """
    Provider chain: try the primary search, fall back to the secondary.

    The primary is skipped when not configured (None). A primary failure or an
    empty primary result moves on to the secondary; a secondary failure
    propagates to the caller.

    Usage:
        search = FallbackSearch(primary=brave_adapter, secondary=duckduckgo_adapter)
        results = await search.search("dólar hoje")
    """

    def __init__(
        self,
        primary: Optional[SearchCapability],
        secondary: SearchCapability,
    ):
        self.primary = primary
        self.secondary = secondary
        self.logger = get_logger("FallbackSearch")

    async def search(self, query: str) -> list[SourceRecord]:
        if self.primary is not None:
            try:
                results = await self.primary.search(query)
                if results:
                    self.logger.debug("Primary search returned results", results=len(results))
                    return results
                self.logger.info("Primary search returned nothing, using fallback")
            except Exception as e:
                self.logger.warning("Primary search failed, using fallback", error=repr(e))

        return await self.secondary.search(query)


__all__ = ["ChatCapability", "SearchCapability", "FallbackSearch"]
