"""Public read-only links to personal collections."""

from __future__ import annotations

import logging
from collections.abc import Callable

from colletro.application.dtos.collection import (
    CollectionResult,
    SharedCollection,
    ShareSettings,
)
from colletro.application.interfaces.repositories import (
    ICollectionRepository,
    IUserRepository,
)
from colletro.application.interfaces.services import IUnitOfWork
from colletro.domain.exceptions import ResourceNotFoundException
from colletro.shared.utils.generators import generate_share_token

logger = logging.getLogger(__name__)


def _settings(collection: CollectionResult) -> ShareSettings:
    return ShareSettings(
        id=collection.id,
        name=collection.name,
        is_public=collection.is_public,
        share_token=collection.share_token,
    )


class PublicShareService:
    """Toggle a collection's public link and resolve links for anonymous readers.

    A token is minted the first time a collection is made public and is
    kept when it goes private again, so re-enabling restores the same link.
    """

    def __init__(
        self,
        collection_repo: ICollectionRepository,
        user_repo: IUserRepository,
        uow: IUnitOfWork,
        token_factory: Callable[[], str] = generate_share_token,
    ) -> None:
        self._collection_repo = collection_repo
        self._user_repo = user_repo
        self._uow = uow
        self._token_factory = token_factory

    async def get_share_settings(self, collection_id: str, user_id: str) -> ShareSettings:
        collection = await self._collection_repo.get_by_id_and_user(collection_id, user_id)
        if collection is None:
            raise ResourceNotFoundException("collection", collection_id)
        return _settings(collection)

    async def update_share_settings(
        self, collection_id: str, user_id: str, is_public: bool
    ) -> ShareSettings:
        async with self._uow.transaction():
            collection = await self._collection_repo.get_by_id_and_user(
                collection_id, user_id
            )
            if collection is None:
                raise ResourceNotFoundException("collection", collection_id)
            values: dict[str, object] = {"is_public": is_public}
            if is_public and not collection.share_token:
                values["share_token"] = self._token_factory()
            await self._collection_repo.update_fields(collection_id, values)
            updated = await self._collection_repo.get_by_id_and_user(collection_id, user_id)
        if updated is None:
            raise ResourceNotFoundException("collection", collection_id)
        logger.info("Collection %s public link %s", collection_id, "on" if is_public else "off")
        return _settings(updated)

    async def get_shared_collection(self, share_token: str) -> SharedCollection:
        """Resolve a public link. Unknown tokens and private collections look the same."""
        collection = await self._collection_repo.get_by_share_token(share_token)
        if collection is None or not collection.is_public:
            raise ResourceNotFoundException("shared_collection", "token")
        owner = await self._user_repo.get_author_summary(collection.user_id)
        return SharedCollection(collection=collection, owner=owner)
