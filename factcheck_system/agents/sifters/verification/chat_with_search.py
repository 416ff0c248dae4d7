"""Conversational reply that pulls in web data when the model asks for it.

Flow per message:
1. Append the user message to the turns (unless it already is the last turn)
2. SearchDecisionStep decides whether fresh data is needed
3. If so, search and answer with a web-data block appended to the context
4. Otherwise, or when the search fails or finds nothing, answer plainly

Every reply is sent with the assistant system prompt ahead of any extra context.

Decision errors propagate; search problems only fall through to a plain reply.

Usage:
    chat_flow = WebSearchChat(chat=chat_capability, search=search_capability)
    result = await chat_flow.respond("quem ganhou o jogo de ontem?", history)
"""

from typing import Optional, Sequence

from factcheck_system.agents.sifters.verification.search_decision import SearchDecisionStep
from factcheck_system.agents.sifters.verification.source_formatting import format_web_results
from factcheck_system.config.prompts import MAIN_SYSTEM_PROMPT, WEB_DATA_CONTEXT_TEMPLATE
from factcheck_system.config.settings import settings
from factcheck_system.data_management.schemas import (
    ChatRole,
    ChatSearchResult,
    ChatTurn,
    SearchQuery,
)
from factcheck_system.exceptions import InvalidQueryError, ProcessingError
from factcheck_system.llm.capabilities import ChatCapability, SearchCapability
from factcheck_system.utils.logging import get_correlation_id, get_structured_logger


class WebSearchChat:
    """Chat flow with an optional, model-decided web search."""

    def __init__(
        self,
        chat: ChatCapability,
        search: SearchCapability,
        decision_step: Optional[SearchDecisionStep] = None,
        system_prompt: Optional[str] = MAIN_SYSTEM_PROMPT,
    ) -> None:
        self.chat = chat
        self.search = search
        self.decision_step = decision_step or SearchDecisionStep(chat=chat)
        self.system_prompt = system_prompt
        self._logger = get_structured_logger(__name__, component="WebSearchChat")

    async def respond(
        self,
        user_message: str,
        history: Sequence[ChatTurn] = (),
        additional_context: Optional[str] = None,
    ) -> ChatSearchResult:
        """Answer a user message, searching the web first when needed.

        Args:
            user_message: Current message.
            history: Prior turns, oldest first. May already end with the message.
            additional_context: Extra context, e.g. the rendered channel context.

        Returns:
            ChatSearchResult with the reply and whether web data was used.

        Raises:
            DecisionParseError: The search decision could not be parsed.
            ProcessingError: The chat capability failed.
        """
        log = self._logger.bind(correlation_id=get_correlation_id())

        turns = list(history)
        if not turns or turns[-1].content != user_message:
            turns.append(ChatTurn(role=ChatRole.USER, content=user_message))

        decision = await self.decision_step.decide(user_message, turns)

        if decision.needs_search:
            log.info("web_search_requested", search_query=decision.search_query[:80])
            search_context = await self._search_context(decision.search_query, log)
            if search_context:
                context = self._with_system_prompt(
                    WEB_DATA_CONTEXT_TEMPLATE.format(
                        additional_context=additional_context or "",
                        search_context=search_context,
                    ).lstrip("\n")
                )
                response = await self._chat(turns, context, log)
                return ChatSearchResult(
                    response=response,
                    search_performed=True,
                    search_query=decision.search_query,
                )
        else:
            log.debug("web_search_skipped", thought=decision.thought[:200])

        response = await self._chat(turns, self._with_system_prompt(additional_context), log)
        return ChatSearchResult(response=response, search_performed=False)

    def _with_system_prompt(self, context: Optional[str]) -> Optional[str]:
        parts = [part for part in (self.system_prompt, context) if part]
        return "\n\n".join(parts) or None

    async def _search_context(self, search_query: str, log) -> str:
        """Rendered results for the query, or "" when there is nothing usable."""
        try:
            query = SearchQuery.create(search_query, max_length=settings.search_query_max_length)
            results = await self.search.search(str(query))
        except InvalidQueryError as e:
            log.warning("web_search_query_invalid", error=str(e))
            return ""
        except Exception as e:
            log.error("web_search_failed", error=str(e))
            return ""

        if not results:
            log.warning("web_search_empty")
            return ""

        log.debug("search_executed", results=len(results))
        return format_web_results(results)

    async def _chat(self, turns: list[ChatTurn], context: Optional[str], log) -> str:
        try:
            return await self.chat.chat(turns, context=context)
        except Exception as e:
            log.error("chat_failed", error=str(e))
            raise ProcessingError() from e


__all__ = ["WebSearchChat"]
