"""Verification domain schemas: verdict statuses, reports and results.

Defines the structures produced by the scorer, the classifier, the search
decision step and the verification use cases. Scores and confidences are
integers on a 0-100 scale.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from factcheck_system.data_management.schemas.source_schema import SourceRecord


class ClaimStatus(str, Enum):
    """Outcome of a claim verification.

    TRUE: The analysis supports the claim.
    FALSE: The analysis contradicts the claim.
    PARTIALLY_TRUE: The claim is true only in part or needs context.
    INSUFFICIENT_DATA: The analysis does not commit to any of the above.
    """

    TRUE = "true"
    FALSE = "false"
    PARTIALLY_TRUE = "partially_true"
    INSUFFICIENT_DATA = "insufficient_data"


class SourceQualityReport(BaseModel):
    """Reliability rating for a set of sources.

    ``details`` holds one human-readable finding per scoring rule that fired,
    in rule order.
    """

    score: int = Field(..., ge=0, le=100, description="Aggregate quality score")
    details: list[str] = Field(default_factory=list, description="Findings in rule order")


class ClaimAnalysis(BaseModel):
    """Everything the classifier extracts from one analysis text."""

    status: ClaimStatus
    confidence: int = Field(..., ge=0, le=100)
    red_flags: list[str] = Field(default_factory=list)
    supporting_points: list[str] = Field(default_factory=list)


class ClaimVerdict(BaseModel):
    """Structured conclusion about a claim.

    ``status`` is always one of the four ClaimStatus values and
    ``confidence`` is always within 0-100; pydantic rejects anything else.
    """

    claim: str = Field(..., min_length=1, description="Claim as submitted")
    status: ClaimStatus = Field(..., description="Classified verdict")
    explanation: str = Field(
        ..., description="Model analysis plus alert and positive-point blocks"
    )
    sources: list[SourceRecord] = Field(
        default_factory=list, description="Sources the analysis was based on"
    )
    confidence: int = Field(..., ge=0, le=100, description="Confidence 0-100")
    red_flags: list[str] = Field(default_factory=list)
    supporting_points: list[str] = Field(default_factory=list)
    source_quality: Optional[SourceQualityReport] = Field(default=None)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "claim": "Vacinas causam autismo",
                    "status": "false",
                    "explanation": "A afirmação é falsa. Estudos amplos ...",
                    "sources": [],
                    "confidence": 90,
                    "red_flags": [],
                    "supporting_points": ["✅ Referencia estudos ou pesquisas"],
                }
            ]
        }
    }


class SearchDecision(BaseModel):
    """Whether a message needs fresh web data, and the query to use."""

    needs_search: bool = Field(..., description="Strict boolean from the model output")
    search_query: str = Field(..., description="Query to run; never blank when needed")
    thought: str = Field(..., description="Model reasoning for the decision")
    confidence: Optional[int] = Field(default=None, ge=0, le=100)


class ChatSearchResult(BaseModel):
    """Reply produced by the web-search chat flow."""

    response: str
    search_performed: bool = False
    search_query: Optional[str] = None


class SearchAnalysis(BaseModel):
    """Sourced synthesis of a search topic."""

    query: str
    analysis: str
    sources: list[SourceRecord] = Field(default_factory=list)
    source_quality: SourceQualityReport
