"""
Tests for the Elasticsearch notification mirror.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from elasticsearch import NotFoundError as IndexNotFoundError

from fms.services.search import SearchMirror


@pytest.fixture
def es_client():
    client = MagicMock()
    client.index = AsyncMock()
    client.delete = AsyncMock()
    client.search = AsyncMock()
    client.close = AsyncMock()
    return client


class TestSearchMirror:

    @pytest.mark.asyncio
    async def test_index_uses_record_id_as_document_id(self, es_client):
        mirror = SearchMirror(es_client, "notifications")
        document = {"id": 5, "title": "Gate change"}

        assert await mirror.index(5, document) is True
        es_client.index.assert_awaited_once_with(index="notifications", id="5", document=document)

    @pytest.mark.asyncio
    async def test_index_failure_is_swallowed(self, es_client):
        es_client.index.side_effect = ConnectionError("cluster unreachable")
        mirror = SearchMirror(es_client, "notifications")

        assert await mirror.index(5, {"id": 5}) is False

    @pytest.mark.asyncio
    async def test_delete_of_absent_document_is_not_an_error(self, es_client):
        es_client.delete.side_effect = IndexNotFoundError("not_found", MagicMock(status=404), {})
        mirror = SearchMirror(es_client, "notifications")

        assert await mirror.delete(5) is False

    @pytest.mark.asyncio
    async def test_query_returns_sources_in_hit_order(self, es_client):
        es_client.search.return_value = {
            "hits": {"hits": [{"_source": {"id": 2}}, {"_source": {"id": 1}}]},
        }
        mirror = SearchMirror(es_client, "notifications")

        assert await mirror.query("delay") == [{"id": 2}, {"id": 1}]
        es_client.search.assert_awaited_once_with(
            index="notifications",
            query={"query_string": {"query": "delay"}},
        )

    @pytest.mark.asyncio
    async def test_query_failure_returns_no_hits(self, es_client):
        es_client.search.side_effect = RuntimeError("search_phase_execution_exception")
        mirror = SearchMirror(es_client, "notifications")

        assert await mirror.query("delay") == []

    @pytest.mark.asyncio
    async def test_disabled_mirror_is_a_no_op(self):
        mirror = SearchMirror(None, "notifications")

        assert mirror.enabled is False
        assert await mirror.index(1, {}) is False
        assert await mirror.delete(1) is False
        assert await mirror.query("anything") == []
        await mirror.close()
