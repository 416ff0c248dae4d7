"""Prompt templates for the chat capability.

Modules:
    system_prompts: Role prompts passed as chat context
    verification_prompts: Search decision, claim verification and analysis prompts
"""

from factcheck_system.config.prompts.system_prompts import (
    MAIN_SYSTEM_PROMPT,
    FACT_CHECK_SYSTEM_PROMPT,
    SEARCH_ANALYSIS_SYSTEM_PROMPT,
)
from factcheck_system.config.prompts.verification_prompts import (
    NO_HISTORY_PLACEHOLDER,
    NO_SOURCES_PLACEHOLDER,
    SEARCH_DECISION_PROMPT,
    CLAIM_VERIFICATION_PROMPT,
    SEARCH_ANALYSIS_PROMPT,
    WEB_DATA_CONTEXT_TEMPLATE,
)

__all__ = [
    "MAIN_SYSTEM_PROMPT",
    "FACT_CHECK_SYSTEM_PROMPT",
    "SEARCH_ANALYSIS_SYSTEM_PROMPT",
    "NO_HISTORY_PLACEHOLDER",
    "NO_SOURCES_PLACEHOLDER",
    "SEARCH_DECISION_PROMPT",
    "CLAIM_VERIFICATION_PROMPT",
    "SEARCH_ANALYSIS_PROMPT",
    "WEB_DATA_CONTEXT_TEMPLATE",
]
