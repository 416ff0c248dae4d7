"""Verification pipelines built on the chat and search capabilities.

Core workflows:
1. SearchDecisionStep: should this message trigger a web search?
2. ClaimVerifier: search, score, analyze and classify a claim
3. WebSearchChat: conversational reply with optional web data
4. SearchAnalyzer: sourced synthesis of a search topic

Each run binds its own correlation id to the structlog context.
"""

from factcheck_system.agents.sifters.verification.chat_with_search import WebSearchChat
from factcheck_system.agents.sifters.verification.claim_verifier import (
    ClaimVerifier,
    compose_explanation,
)
from factcheck_system.agents.sifters.verification.search_analysis import SearchAnalyzer
from factcheck_system.agents.sifters.verification.search_decision import (
    SearchDecisionStep,
    parse_decision_payload,
    repair_decision,
)
from factcheck_system.agents.sifters.verification.source_formatting import (
    clean_redirect_url,
    format_history,
    format_sources,
    format_web_results,
)

__all__ = [
    "ClaimVerifier",
    "SearchAnalyzer",
    "SearchDecisionStep",
    "WebSearchChat",
    "clean_redirect_url",
    "compose_explanation",
    "format_history",
    "format_sources",
    "format_web_results",
    "parse_decision_payload",
    "repair_decision",
]
