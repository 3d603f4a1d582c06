"""Bulk image assignment for items of a recommended collection."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from colletro.application.dtos.admin import BulkImageUpdateResult, ImageUpdate
from colletro.application.interfaces.repositories import IRecommendedCollectionRepository
from colletro.application.interfaces.services import IUnitOfWork
from colletro.domain.exceptions import ResourceNotFoundException, ValidationException

logger = logging.getLogger(__name__)


class BulkItemImageService:
    """All-or-nothing image update: every id must belong to the collection."""

    def __init__(
        self,
        recommended_repo: IRecommendedCollectionRepository,
        uow: IUnitOfWork,
    ) -> None:
        self._recommended_repo = recommended_repo
        self._uow = uow

    async def update_item_images(
        self, collection_id: str, updates: Sequence[ImageUpdate]
    ) -> BulkImageUpdateResult:
        """Apply every update in one transaction, or none of them.

        Raises:
            ValidationException: Empty batch, blank image, or an id outside the collection.
            ResourceNotFoundException: Collection does not exist.
        """
        if not updates:
            raise ValidationException("updates must be a non-empty list", field="updates")
        for update in updates:
            if not update.item_id or not update.image:
                raise ValidationException(
                    "Each update requires item_id and image", field="updates"
                )

        async with self._uow.transaction():
            collection = await self._recommended_repo.get_by_id(collection_id)
            if collection is None:
                raise ResourceNotFoundException("recommended_collection", collection_id)
            member_ids = await self._recommended_repo.get_item_ids(collection_id)
            foreign = sorted({u.item_id for u in updates} - member_ids)
            if foreign:
                raise ValidationException(
                    f"Some items do not belong to this collection: {', '.join(foreign)}",
                    field="updates",
                )
            items = await self._recommended_repo.update_item_images(updates)

        logger.info("Updated images for %d items in %s", len(items), collection_id)
        return BulkImageUpdateResult(updated=len(items), items=items)
