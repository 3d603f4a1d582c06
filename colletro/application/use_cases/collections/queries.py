"""Read-side collection queries."""

from __future__ import annotations

from colletro.application.dtos.collection import CollectionResult
from colletro.application.interfaces.repositories import (
    CollectionRepositoryScope,
    ICollectionRepository,
)
from colletro.application.interfaces.services import IRequestDeduplicator
from colletro.core.constants import CACHE_KEY_SEP, DEDUP_PREFIX_COLLECTIONS
from colletro.domain.exceptions import ResourceNotFoundException


def collections_key(user_id: str) -> str:
    """Deduplication key for a user's collection list."""
    return f"{DEDUP_PREFIX_COLLECTIONS}{CACHE_KEY_SEP}{user_id}"


class CollectionQueries:
    """List and fetch a user's collections.

    The list fetch is shared between concurrent callers, so it must not
    borrow any one caller's request session: it opens its own repository
    through list_scope and closes it when the fetch finishes, whichever
    caller started it.
    """

    def __init__(
        self,
        collection_repo: ICollectionRepository,
        deduplicator: IRequestDeduplicator,
        list_scope: CollectionRepositoryScope,
    ) -> None:
        self._collection_repo = collection_repo
        self._deduplicator = deduplicator
        self._list_scope = list_scope

    async def _fetch_list(self, user_id: str) -> list[CollectionResult]:
        async with self._list_scope() as repo:
            return await repo.list_by_user(user_id)

    async def list_collections(self, user_id: str) -> list[CollectionResult]:
        """Concurrent identical list calls share one repository fetch."""
        return await self._deduplicator.run(
            collections_key(user_id), lambda: self._fetch_list(user_id)
        )

    async def get_collection(self, collection_id: str, user_id: str) -> CollectionResult:
        collection = await self._collection_repo.get_by_id_and_user(collection_id, user_id)
        if collection is None:
            raise ResourceNotFoundException("collection", collection_id)
        return collection
