"""Metadata search across registered external sources."""

from __future__ import annotations

import asyncio
import logging

from colletro.application.dtos.search import CandidateResult
from colletro.application.interfaces.services import IMetadataSource
from colletro.domain.exceptions import MetadataSourceTimeoutException, ValidationException
from colletro.shared.telemetry.tracing import add_span_attributes, traced

logger = logging.getLogger(__name__)


class MetadataSourceRegistry:
    """Sources keyed by id; search is bounded by timeout_seconds."""

    def __init__(
        self,
        sources: list[IMetadataSource] | None = None,
        timeout_seconds: float = 10.0,
    ) -> None:
        self._sources: dict[str, IMetadataSource] = {}
        self._timeout_seconds = timeout_seconds
        for source in sources or []:
            self.register(source)

    def register(self, source: IMetadataSource) -> None:
        self._sources[source.source_id] = source

    def source_ids(self) -> list[str]:
        return sorted(self._sources)

    @traced("metadata.search")
    async def search(self, source_id: str, query: str) -> list[CandidateResult]:
        """Search one source.

        Raises:
            ValidationException: Unknown source id or blank query.
            MetadataSourceTimeoutException: Source did not answer in time.
        """
        source = self._sources.get(source_id)
        if source is None:
            raise ValidationException(f"Unknown metadata source: {source_id}", field="source")
        query = (query or "").strip()
        if not query:
            raise ValidationException("Search query is required", field="query")
        try:
            results = await asyncio.wait_for(
                source.search(query), timeout=self._timeout_seconds
            )
        except TimeoutError as e:
            logger.warning("Metadata source %s timed out for query %r", source_id, query)
            raise MetadataSourceTimeoutException(source_id, self._timeout_seconds) from e
        results = list(results or [])
        add_span_attributes(metadata_source=source_id, metadata_results=len(results))
        return results
