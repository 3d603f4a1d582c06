"""Admin: promote a personal or community collection into the recommended catalog."""

from __future__ import annotations

import logging

from colletro.application.dtos.collection import (
    CatalogDraft,
    CollectionResult,
    CommunityCollectionResult,
    RecommendedCollectionResult,
)
from colletro.application.interfaces.repositories import (
    ICollectionRepository,
    ICommunityCollectionRepository,
    IRecommendedCollectionRepository,
)
from colletro.application.interfaces.services import IUnitOfWork
from colletro.application.use_cases.collections.drafts import (
    copy_field_definitions,
    item_drafts,
)
from colletro.core.constants import COVER_FIT_CONTAIN
from colletro.domain.exceptions import ResourceNotFoundException, ValidationException

logger = logging.getLogger(__name__)


def build_catalog_draft(
    source: CollectionResult | CommunityCollectionResult, default_fit: str | None = None
) -> CatalogDraft:
    """Public catalog copy of a collection: metadata, field schema and items, no ownership."""
    return CatalogDraft(
        name=source.name,
        description=source.description,
        category=source.category,
        template=source.template,
        custom_field_definitions=copy_field_definitions(source.custom_field_definitions),
        cover_image=source.cover_image,
        cover_image_fit=source.cover_image_fit or default_fit,
        tags=list(source.tags),
        is_public=True,
        items=item_drafts(source.items),
    )


class ConvertToRecommendedService:
    """Copy a collection into a new public recommended collection.

    Recommended names are unique; converting into an existing name is
    rejected rather than merged.
    """

    def __init__(
        self,
        collection_repo: ICollectionRepository,
        community_repo: ICommunityCollectionRepository,
        recommended_repo: IRecommendedCollectionRepository,
        uow: IUnitOfWork,
    ) -> None:
        self._collection_repo = collection_repo
        self._community_repo = community_repo
        self._recommended_repo = recommended_repo
        self._uow = uow

    async def _create(self, draft: CatalogDraft) -> RecommendedCollectionResult:
        if await self._recommended_repo.exists_with_name(draft.name):
            raise ValidationException(
                "A recommended collection with this name already exists", field="name"
            )
        return await self._recommended_repo.create_with_items(draft)

    async def from_collection(self, collection_id: str) -> RecommendedCollectionResult:
        async with self._uow.transaction():
            collection = await self._collection_repo.get_by_id(collection_id)
            if collection is None:
                raise ResourceNotFoundException("collection", collection_id)
            recommended = await self._create(build_catalog_draft(collection))
        logger.info(
            "Converted collection %s to recommended %s (%d items)",
            collection_id,
            recommended.id,
            len(recommended.items),
        )
        return recommended

    async def from_community(self, community_collection_id: str) -> RecommendedCollectionResult:
        async with self._uow.transaction():
            community = await self._community_repo.get_by_id(community_collection_id)
            if community is None:
                raise ResourceNotFoundException("community_collection", community_collection_id)
            recommended = await self._create(
                build_catalog_draft(community, default_fit=COVER_FIT_CONTAIN)
            )
        logger.info(
            "Converted community collection %s to recommended %s (%d items)",
            community_collection_id,
            recommended.id,
            len(recommended.items),
        )
        return recommended
