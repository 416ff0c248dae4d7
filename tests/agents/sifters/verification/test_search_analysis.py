"""Tests for SearchAnalyzer."""

from unittest.mock import AsyncMock

import pytest

from factcheck_system.agents.sifters.verification.search_analysis import SearchAnalyzer
from factcheck_system.config.prompts import SEARCH_ANALYSIS_SYSTEM_PROMPT
from factcheck_system.data_management.schemas import SearchProvider, SourceRecord
from factcheck_system.exceptions import (
    InvalidQueryError,
    NoSearchResultsError,
    ProcessingError,
)


@pytest.fixture
def sources() -> list[SourceRecord]:
    return [
        SourceRecord(
            title="Reforma tributária aprovada",
            snippet="Texto segue para sanção.",
            url="https://www12.senado.leg.br/noticias/a",
            origin=SearchProvider.BRAVE,
        ),
        SourceRecord(
            title="O que muda com a reforma",
            snippet="Entenda os pontos principais.",
            url="https://g1.globo.com/economia/b",
            origin=SearchProvider.BRAVE,
        ),
    ]


@pytest.fixture
def mock_search(sources):
    search = AsyncMock()
    search.search.return_value = sources
    return search


@pytest.fixture
def mock_chat():
    chat = AsyncMock()
    chat.chat.return_value = "As fontes concordam que a reforma foi aprovada [1][2]."
    return chat


@pytest.fixture
def analyzer(mock_search, mock_chat) -> SearchAnalyzer:
    return SearchAnalyzer(search=mock_search, chat=mock_chat)


class TestAnalyze:
    @pytest.mark.asyncio
    async def test_analysis_with_sources(self, analyzer, mock_chat, mock_search, sources):
        result = await analyzer.analyze("  reforma tributária  ")

        mock_search.search.assert_awaited_once_with("reforma tributária")
        assert result.query == "reforma tributária"
        assert result.analysis == mock_chat.chat.return_value
        assert result.sources == sources
        # 20 (two sources) + 15 (g1) + 20 (distinct hosts)
        assert result.source_quality.score == 55

    @pytest.mark.asyncio
    async def test_prompt(self, analyzer, mock_chat):
        await analyzer.analyze("reforma tributária")

        prompt = mock_chat.chat.await_args.args[0][0].content
        assert "Analise as informações sobre: reforma tributária" in prompt
        assert "[2] O que muda com a reforma\nEntenda os pontos principais.\nFonte: https://g1.globo.com/economia/b" in prompt
        assert mock_chat.chat.await_args.kwargs["context"] == SEARCH_ANALYSIS_SYSTEM_PROMPT

    @pytest.mark.asyncio
    async def test_no_results(self, analyzer, mock_search, mock_chat):
        mock_search.search.return_value = []

        with pytest.raises(NoSearchResultsError):
            await analyzer.analyze("assunto inexistente")

        mock_chat.chat.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_search_failure_means_no_results(self, analyzer, mock_search):
        mock_search.search.side_effect = ConnectionError("down")

        with pytest.raises(NoSearchResultsError):
            await analyzer.analyze("reforma tributária")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("query", ["", "   ", "x" * 501])
    async def test_invalid_query(self, analyzer, mock_search, query):
        with pytest.raises(InvalidQueryError):
            await analyzer.analyze(query)

        mock_search.search.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_chat_failure(self, analyzer, mock_chat):
        mock_chat.chat.side_effect = TimeoutError()

        with pytest.raises(ProcessingError):
            await analyzer.analyze("reforma tributária")
