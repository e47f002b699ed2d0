"""
Elasticsearch mirror for notifications.

The database stays the source of truth. The index is a best-effort copy:
index and delete failures are logged and swallowed, and a failing query
returns no hits.
"""

from __future__ import annotations

from typing import Any

from elasticsearch import AsyncElasticsearch
from elasticsearch import NotFoundError as IndexNotFoundError

from fms.core.config import settings
from fms.core.logging import get_logger

logger = get_logger(__name__)


class SearchMirror:
    """Keeps one Elasticsearch index in step with a table."""

    def __init__(self, client: AsyncElasticsearch | None, index: str) -> None:
        self._client = client
        self.index_name = index

    @classmethod
    def from_settings(cls) -> "SearchMirror":
        if not settings.ELASTICSEARCH_ENABLED:
            logger.info("Search mirror disabled")
            return cls(None, settings.ELASTICSEARCH_INDEX_NOTIFICATIONS)
        client = AsyncElasticsearch(settings.ELASTICSEARCH_URL)
        return cls(client, settings.ELASTICSEARCH_INDEX_NOTIFICATIONS)

    @property
    def enabled(self) -> bool:
        return self._client is not None

    async def close(self) -> None:
        if self._client is not None:
            await self._client.close()

    async def index(self, record_id: int, document: dict[str, Any]) -> bool:
        """Index (or overwrite) *document* under *record_id*."""
        if self._client is None:
            return False
        try:
            await self._client.index(index=self.index_name, id=str(record_id), document=document)
        except Exception as exc:
            logger.error(
                "Failed to index document (non-fatal)",
                index=self.index_name,
                record_id=record_id,
                error=str(exc),
            )
            return False
        logger.debug("Document indexed", index=self.index_name, record_id=record_id)
        return True

    async def delete(self, record_id: int) -> bool:
        """Remove *record_id* from the index; a missing document is not an error."""
        if self._client is None:
            return False
        try:
            await self._client.delete(index=self.index_name, id=str(record_id))
        except IndexNotFoundError:
            logger.debug("Document already absent from index", index=self.index_name, record_id=record_id)
            return False
        except Exception as exc:
            logger.error(
                "Failed to delete document from index (non-fatal)",
                index=self.index_name,
                record_id=record_id,
                error=str(exc),
            )
            return False
        return True

    async def query(self, text: str) -> list[dict[str, Any]]:
        """Free-text search; hits come back in engine relevance order."""
        if self._client is None:
            return []
        try:
            response = await self._client.search(
                index=self.index_name,
                query={"query_string": {"query": text}},
            )
        except Exception as exc:
            logger.error("Search failed", index=self.index_name, query=text, error=str(exc))
            return []
        return [hit["_source"] for hit in response["hits"]["hits"]]
