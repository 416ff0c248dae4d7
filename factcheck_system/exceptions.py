"""Error types raised across the fact-check pipeline.

``str(error)`` is always a short, non-technical message that can be shown to
an end user as-is. The technical cause travels as ``__cause__`` and is logged
at the raise site.
"""


class FactCheckError(Exception):
    """Base class for errors that carry a user-facing message."""

    default_message = "Ocorreu um erro inesperado. Tente novamente."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)

    @property
    def user_message(self) -> str:
        return str(self)


class ProcessingError(FactCheckError):
    """Raised when the chat capability fails or times out."""

    default_message = (
        "Não foi possível processar sua solicitação agora. "
        "Tente novamente em instantes."
    )


class DecisionParseError(FactCheckError):
    """Raised when the search decision response is not a JSON object."""

    default_message = (
        "Não consegui processar sua pergunta. "
        "Tente reformular de forma mais clara."
    )


class InvalidClaimError(FactCheckError, ValueError):
    """Raised when a claim is empty before it enters the pipeline."""

    default_message = "Informe a afirmação que você quer verificar."


class InvalidQueryError(FactCheckError, ValueError):
    """Raised when a search query is empty or too long."""

    default_message = "A consulta de busca é inválida."


class NoSearchResultsError(FactCheckError):
    """Raised when a search analysis finds no sources at all."""

    default_message = "Nenhum resultado encontrado para essa busca."


__all__ = [
    "FactCheckError",
    "ProcessingError",
    "DecisionParseError",
    "InvalidClaimError",
    "InvalidQueryError",
    "NoSearchResultsError",
]
