"""Search result and search query schemas.

SourceRecord is produced by the search capability and consumed by the
scorer, the classifier and the prompt formatter. SearchQuery validates
query text at the boundary before any provider is called.
"""

from enum import Enum

from pydantic import BaseModel, Field

from factcheck_system.exceptions import InvalidQueryError

MAX_QUERY_LENGTH = 500


class SearchProvider(str, Enum):
    """Search backend that produced a result."""

    BRAVE = "brave"
    DUCKDUCKGO = "duckduckgo"


class SourceRecord(BaseModel):
    """A single retrieved web result used as evidence."""

    title: str = Field(..., description="Result title")
    snippet: str = Field(default="", description="Text excerpt shown by the provider")
    url: str = Field(..., description="Result URL (may be malformed)")
    origin: SearchProvider = Field(..., description="Provider that returned the result")

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "title": "Vacinas não causam autismo",
                    "snippet": "Estudos com milhões de crianças não encontraram relação.",
                    "url": "https://www.bbc.com/portuguese/geral-123",
                    "origin": "brave",
                }
            ]
        },
    }


class SearchQuery(BaseModel):
    """Validated search query text.

    Build instances with :meth:`create`, which strips whitespace and rejects
    blank or oversized queries with :class:`InvalidQueryError`.
    """

    value: str

    model_config = {"frozen": True}

    @classmethod
    def create(cls, query: str, max_length: int = MAX_QUERY_LENGTH) -> "SearchQuery":
        text = (query or "").strip()
        if not text:
            raise InvalidQueryError("A consulta de busca não pode ser vazia.")
        if len(text) > max_length:
            raise InvalidQueryError(
                f"A consulta de busca é muito longa (máximo de {max_length} caracteres)."
            )
        return cls(value=text)

    def __str__(self) -> str:
        return self.value
