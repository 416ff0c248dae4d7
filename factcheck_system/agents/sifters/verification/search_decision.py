"""Search decision step: ask the model whether a message needs web data.

The model answers with a small JSON object:

    {"thought": "...", "needsSearch": true, "searchQuery": "...", "confidence": 80}

Models frequently wrap that object in markdown fences or surround it with
prose, so the response is sanitized before parsing and each field is repaired
individually. A response with no parseable object is an error, never a silent
"no search".

Usage:
    from factcheck_system.agents.sifters.verification import SearchDecisionStep

    step = SearchDecisionStep(chat=chat_capability)
    decision = await step.decide("quanto está o dólar hoje?", history)
"""

import json
import math
import re
from datetime import date
from typing import Any, Callable, Optional, Sequence

from factcheck_system.agents.sifters.verification.source_formatting import format_history
from factcheck_system.config.prompts import SEARCH_DECISION_PROMPT
from factcheck_system.config.settings import settings
from factcheck_system.data_management.schemas import ChatRole, ChatTurn, SearchDecision
from factcheck_system.exceptions import DecisionParseError, ProcessingError
from factcheck_system.llm.capabilities import ChatCapability
from factcheck_system.utils.logging import get_correlation_id, get_structured_logger

DEFAULT_THOUGHT = "No reasoning provided"

_FENCE_RE = re.compile(r"```(?:json)?", re.IGNORECASE)
_OBJECT_RE = re.compile(r"\{.*\}", re.DOTALL)


def parse_decision_payload(raw: str) -> dict[str, Any]:
    """
    Extract the decision object from a model response.

    Strips markdown code fences, then parses the span from the first ``{`` to
    the last ``}``.

    Args:
        raw: Model response text

    Returns:
        Parsed JSON object

    Raises:
        DecisionParseError: No object span, invalid JSON, or JSON that is not an object
    """
    cleaned = _FENCE_RE.sub("", raw or "").strip()
    match = _OBJECT_RE.search(cleaned)
    if match is None:
        raise DecisionParseError()

    try:
        payload = json.loads(match.group(0))
    except json.JSONDecodeError as e:
        raise DecisionParseError() from e

    if not isinstance(payload, dict):
        raise DecisionParseError()

    return payload


def repair_decision(payload: dict[str, Any], message: str) -> SearchDecision:
    """
    Build a SearchDecision from a parsed payload, filling gaps.

    - needs_search is True only for a literal JSON ``true``
    - a missing or blank searchQuery becomes the original message
    - a missing thought becomes DEFAULT_THOUGHT
    - confidence is kept when numeric (clamped to 0-100), else None
    """
    needs_search = payload.get("needsSearch") is True

    query = payload.get("searchQuery")
    if not isinstance(query, str) or not query.strip():
        query = message

    thought = payload.get("thought")
    if not isinstance(thought, str) or not thought.strip():
        thought = DEFAULT_THOUGHT

    return SearchDecision(
        needs_search=needs_search,
        search_query=query.strip(),
        thought=thought,
        confidence=_coerce_confidence(payload.get("confidence")),
    )


def _coerce_confidence(value: Any) -> Optional[int]:
    # bool is an int subclass; true/false is not a confidence
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return max(0, min(int(round(value)), 100))


class SearchDecisionStep:
    """
    Decides whether a user message should trigger a web search.

    Attributes:
        chat: Chat capability used for the decision prompt
        history_turns: Most recent history turns embedded in the prompt
        knowledge_cutoff: Cutoff the model is told it has
    """

    def __init__(
        self,
        chat: ChatCapability,
        history_turns: Optional[int] = None,
        knowledge_cutoff: Optional[str] = None,
        today: Callable[[], date] = date.today,
    ):
        """
        Initialize the decision step.

        Args:
            chat: Chat capability
            history_turns: History window (defaults to settings.decision_history_turns)
            knowledge_cutoff: Cutoff text (defaults to settings.knowledge_cutoff)
            today: Returns the current date (injectable for tests)
        """
        self.chat = chat
        self.history_turns = (
            history_turns if history_turns is not None else settings.decision_history_turns
        )
        self.knowledge_cutoff = (
            knowledge_cutoff if knowledge_cutoff is not None else settings.knowledge_cutoff
        )
        self._today = today
        self._logger = get_structured_logger(__name__, component="SearchDecisionStep")

    def build_prompt(self, message: str, recent_history: Sequence[ChatTurn] = ()) -> str:
        """Render the decision prompt for one message."""
        return SEARCH_DECISION_PROMPT.format(
            history=format_history(recent_history, self.history_turns),
            message=message,
            knowledge_cutoff=self.knowledge_cutoff,
            today=self._today().strftime("%d/%m/%Y"),
        )

    async def decide(
        self,
        message: str,
        recent_history: Sequence[ChatTurn] = (),
    ) -> SearchDecision:
        """
        Ask the model whether ``message`` needs fresh web data.

        Args:
            message: Current user message
            recent_history: Conversation so far, oldest first

        Returns:
            Repaired SearchDecision

        Raises:
            ProcessingError: The chat capability failed
            DecisionParseError: The response held no usable JSON object
        """
        log = self._logger.bind(correlation_id=get_correlation_id())
        prompt = self.build_prompt(message, recent_history)

        try:
            raw = await self.chat.chat([ChatTurn(role=ChatRole.USER, content=prompt)])
        except Exception as e:
            log.error("decision_chat_failed", error=str(e))
            raise ProcessingError() from e

        try:
            payload = parse_decision_payload(raw)
        except DecisionParseError:
            log.warning("decision_parse_failed", response_preview=(raw or "")[:200])
            raise

        decision = repair_decision(payload, message)
        log.info(
            "search_decision_made",
            needs_search=decision.needs_search,
            search_query=decision.search_query[:80],
            confidence=decision.confidence,
        )
        return decision


__all__ = [
    "SearchDecisionStep",
    "parse_decision_payload",
    "repair_decision",
    "DEFAULT_THOUGHT",
]
