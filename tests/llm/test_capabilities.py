"""Tests for the capability contracts and FallbackSearch."""

from unittest.mock import AsyncMock

import pytest

from factcheck_system.data_management.schemas import ChatTurn, SearchProvider, SourceRecord
from factcheck_system.llm.capabilities import (
    ChatCapability,
    FallbackSearch,
    SearchCapability,
)


def make_result(origin: SearchProvider) -> SourceRecord:
    return SourceRecord(title="r", url="https://example.com/r", origin=origin)


@pytest.fixture
def primary():
    search = AsyncMock()
    search.search.return_value = [make_result(SearchProvider.BRAVE)]
    return search


@pytest.fixture
def secondary():
    search = AsyncMock()
    search.search.return_value = [make_result(SearchProvider.DUCKDUCKGO)]
    return search


class TestContracts:
    def test_abstract_classes_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            ChatCapability()
        with pytest.raises(TypeError):
            SearchCapability()

    @pytest.mark.asyncio
    async def test_minimal_implementations(self):
        class EchoChat(ChatCapability):
            async def chat(self, turns, context=None, images=None):
                return turns[-1].content

        class StaticSearch(SearchCapability):
            async def search(self, query):
                return [make_result(SearchProvider.BRAVE)]

        assert await EchoChat().chat([ChatTurn(role="user", content="oi")]) == "oi"
        assert len(await StaticSearch().search("q")) == 1


class TestFallbackSearch:
    @pytest.mark.asyncio
    async def test_primary_results_used(self, primary, secondary):
        results = await FallbackSearch(primary, secondary).search("dólar")

        assert results[0].origin == SearchProvider.BRAVE
        secondary.search.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_empty_primary_falls_back(self, primary, secondary):
        primary.search.return_value = []

        results = await FallbackSearch(primary, secondary).search("dólar")

        assert results[0].origin == SearchProvider.DUCKDUCKGO
        secondary.search.assert_awaited_once_with("dólar")

    @pytest.mark.asyncio
    async def test_primary_failure_falls_back(self, primary, secondary):
        primary.search.side_effect = TimeoutError()

        results = await FallbackSearch(primary, secondary).search("dólar")

        assert results[0].origin == SearchProvider.DUCKDUCKGO

    @pytest.mark.asyncio
    async def test_unconfigured_primary(self, secondary):
        results = await FallbackSearch(None, secondary).search("dólar")
        assert results[0].origin == SearchProvider.DUCKDUCKGO

    @pytest.mark.asyncio
    async def test_secondary_failure_propagates(self, primary, secondary):
        primary.search.return_value = []
        secondary.search.side_effect = ConnectionError("down")

        with pytest.raises(ConnectionError):
            await FallbackSearch(primary, secondary).search("dólar")
