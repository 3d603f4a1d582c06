"""Refresh a cloned collection from its recommended source."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from typing import Any

from colletro.application.dtos.collection import (
    CollectionResult,
    ItemDraft,
    RecommendedCollectionResult,
    SyncResult,
    UpdateCheckResult,
)
from colletro.application.interfaces.repositories import (
    ICollectionRepository,
    IItemRepository,
    IRecommendedCollectionRepository,
)
from colletro.application.interfaces.services import IUnitOfWork
from colletro.application.use_cases.collections.drafts import (
    copy_custom_fields,
    item_key,
)
from colletro.domain.exceptions import ResourceNotFoundException, ValidationException
from colletro.shared.telemetry.tracing import traced
from colletro.shared.utils.datetime import ensure_utc, utc_now

logger = logging.getLogger(__name__)

_SYNCED_FIELDS = ("name", "description", "category", "cover_image", "tags")


def _is_customized(
    collection: CollectionResult, source: RecommendedCollectionResult
) -> bool:
    """True when a synced field or the item set (by identity and image) differs."""
    for name in _SYNCED_FIELDS:
        mine, theirs = getattr(collection, name), getattr(source, name)
        if name == "tags":
            mine, theirs = list(mine or []), list(theirs or [])
        if mine != theirs:
            return True
    mine_items = {item_key(i.number, i.name): i.image or None for i in collection.items}
    source_items = {item_key(i.number, i.name): i.image or None for i in source.items}
    return mine_items != source_items


class RecommendedSyncService:
    """Pull new items and updated images/notes from the recommended source.

    Ownership flags are never touched; items removed from the source stay
    in the user's collection.
    """

    def __init__(
        self,
        collection_repo: ICollectionRepository,
        item_repo: IItemRepository,
        recommended_repo: IRecommendedCollectionRepository,
        uow: IUnitOfWork,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._collection_repo = collection_repo
        self._item_repo = item_repo
        self._recommended_repo = recommended_repo
        self._uow = uow
        self._clock = clock

    @traced("collections.sync_from_recommended")
    async def sync_from_recommended(
        self,
        collection_id: str,
        user_id: str,
        preserve_customizations: bool = False,
    ) -> SyncResult:
        async with self._uow.transaction():
            collection = await self._collection_repo.get_by_id_and_user(
                collection_id, user_id
            )
            if collection is None:
                raise ResourceNotFoundException("collection", collection_id)
            if not collection.recommended_collection_id:
                raise ValidationException(
                    "This collection is not from a recommended collection",
                    field="recommended_collection_id",
                )
            source = await self._recommended_repo.get_by_id(
                collection.recommended_collection_id
            )
            if source is None:
                raise ResourceNotFoundException(
                    "recommended_collection", collection.recommended_collection_id
                )

            values: dict[str, Any] = {"last_synced_at": self._clock()}
            for name in _SYNCED_FIELDS:
                mine, theirs = getattr(collection, name), getattr(source, name)
                # With preserve_customizations a differing user value is kept.
                if not (preserve_customizations and mine != theirs):
                    values[name] = list(theirs) if name == "tags" else theirs
            await self._collection_repo.update_fields(collection_id, values)

            existing = {item_key(i.number, i.name): i for i in collection.items}
            to_add: list[ItemDraft] = []
            updated = 0
            for source_item in source.items:
                mine_item = existing.get(item_key(source_item.number, source_item.name))
                if mine_item is None:
                    to_add.append(
                        ItemDraft(
                            name=source_item.name,
                            number=source_item.number,
                            notes=source_item.notes,
                            image=source_item.image,
                            is_owned=False,
                            custom_fields=copy_custom_fields(source_item.custom_fields),
                        )
                    )
                    continue
                if (mine_item.image or None) != (source_item.image or None) or (
                    mine_item.notes or None
                ) != (source_item.notes or None):
                    await self._item_repo.update_fields(
                        mine_item.id,
                        {"image": source_item.image or None, "notes": source_item.notes or None},
                    )
                    updated += 1
            added = await self._item_repo.create_many(collection_id, to_add) if to_add else 0
            result = await self._collection_repo.get_by_id_and_user(collection_id, user_id)
        if result is None:
            raise ResourceNotFoundException("collection", collection_id)
        logger.info(
            "Synced collection %s from recommended %s: %d added, %d updated",
            collection_id,
            source.id,
            added,
            updated,
        )
        return SyncResult(collection=result, items_added=added, items_updated=updated)

    async def check_for_updates(self, collection_id: str, user_id: str) -> UpdateCheckResult:
        """Compare the collection with its recommended source without writing.

        A collection with no recommended source, or whose source has been
        deleted, reports neither an update nor customizations.
        """
        collection = await self._collection_repo.get_by_id_and_user(collection_id, user_id)
        if collection is None:
            raise ResourceNotFoundException("collection", collection_id)
        if not collection.recommended_collection_id:
            return UpdateCheckResult(has_update=False, is_customized=False)
        source = await self._recommended_repo.get_by_id(collection.recommended_collection_id)
        if source is None:
            return UpdateCheckResult(has_update=False, is_customized=False)

        baseline = collection.last_synced_at or collection.created_at
        has_update = (
            source.updated_at is not None
            and baseline is not None
            and ensure_utc(source.updated_at) > ensure_utc(baseline)
        )
        return UpdateCheckResult(
            has_update=has_update,
            is_customized=_is_customized(collection, source),
            recommended=source,
            last_synced_at=collection.last_synced_at,
        )
