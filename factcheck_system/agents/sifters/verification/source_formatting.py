"""Prompt rendering helpers for sources and conversation history."""

from typing import Sequence

from factcheck_system.config.prompts import NO_HISTORY_PLACEHOLDER, NO_SOURCES_PLACEHOLDER
from factcheck_system.data_management.schemas import ChatTurn, SourceRecord
from factcheck_system.utils.urls import clean_redirect_url


def format_sources(sources: Sequence[SourceRecord]) -> str:
    """
    Render sources as numbered blocks the model can cite as [1], [2], ...

    Args:
        sources: Search results in ranking order

    Returns:
        ``[i] title\\nsnippet\\nFonte: url`` blocks separated by blank lines,
        or a placeholder when there are no sources
    """
    if not sources:
        return NO_SOURCES_PLACEHOLDER

    return "\n\n".join(
        f"[{index}] {source.title}\n{source.snippet}\nFonte: {source.url}"
        for index, source in enumerate(sources, start=1)
    )


def format_web_results(sources: Sequence[SourceRecord]) -> str:
    """Render sources for the conversational web-data block, with clean links."""
    return "\n".join(
        f"[{index}] {source.title}\n{source.snippet}\nLink: {clean_redirect_url(source.url)}\n"
        for index, source in enumerate(sources, start=1)
    )


def format_history(turns: Sequence[ChatTurn], limit: int) -> str:
    """Render the last ``limit`` turns as ``role: content`` lines."""
    recent = list(turns)[-limit:] if limit > 0 else []
    if not recent:
        return NO_HISTORY_PLACEHOLDER

    return "\n".join(f"{turn.role.value}: {turn.content}" for turn in recent)


__all__ = ["format_sources", "format_web_results", "format_history", "clean_redirect_url"]
