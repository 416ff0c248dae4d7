"""Schema package for chat turns, search results and verification verdicts.

Primary exports:
- ChatTurn / ChatRole: conversation turns kept in memory and sent to the model
- SourceRecord / SearchProvider / SearchQuery: search inputs and results
- ClaimStatus / ClaimVerdict / SourceQualityReport: verification outputs

Usage:
    from factcheck_system.data_management.schemas import ChatTurn, ChatRole
    turn = ChatTurn(role=ChatRole.USER, content="O dólar subiu hoje?")
"""

from factcheck_system.data_management.schemas.message_schema import (
    ChatRole,
    ChatTurn,
)
from factcheck_system.data_management.schemas.source_schema import (
    MAX_QUERY_LENGTH,
    SearchProvider,
    SearchQuery,
    SourceRecord,
)
from factcheck_system.data_management.schemas.verdict_schema import (
    ChatSearchResult,
    ClaimAnalysis,
    ClaimStatus,
    ClaimVerdict,
    SearchAnalysis,
    SearchDecision,
    SourceQualityReport,
)

__all__ = [
    "ChatRole",
    "ChatTurn",
    "MAX_QUERY_LENGTH",
    "SearchProvider",
    "SearchQuery",
    "SourceRecord",
    "ChatSearchResult",
    "ClaimAnalysis",
    "ClaimStatus",
    "ClaimVerdict",
    "SearchAnalysis",
    "SearchDecision",
    "SourceQualityReport",
]
