"""Share a personal collection to the community and take it back down.

Both operations run their writes in one transaction so a community
collection is never visible with a partial item set.
"""

from __future__ import annotations

import logging

from colletro.application.dtos.collection import CollectionDraft, CommunityCollectionResult
from colletro.application.interfaces.repositories import (
    ICollectionRepository,
    ICommunityCollectionRepository,
)
from colletro.application.interfaces.services import IUnitOfWork
from colletro.application.services.achievement_service import AchievementService
from colletro.application.use_cases.collections.drafts import (
    copy_field_definitions,
    item_drafts,
)
from colletro.domain.exceptions import (
    AuthorizationException,
    ResourceNotFoundException,
    ValidationException,
)

logger = logging.getLogger(__name__)


class CommunitySyncService:
    """Fork a collection into a community collection (share) and reverse it (unshare)."""

    def __init__(
        self,
        collection_repo: ICollectionRepository,
        community_repo: ICommunityCollectionRepository,
        uow: IUnitOfWork,
        achievements: AchievementService,
    ) -> None:
        self._collection_repo = collection_repo
        self._community_repo = community_repo
        self._uow = uow
        self._achievements = achievements

    async def share(self, collection_id: str, user_id: str) -> CommunityCollectionResult:
        """Create a community copy of the collection and link it as the live fork.

        Sharing an already shared collection creates another fork and moves
        the link to it; the earlier fork stays in the community.
        """
        async with self._uow.transaction():
            collection = await self._collection_repo.get_by_id_and_user(
                collection_id, user_id
            )
            if collection is None:
                raise ResourceNotFoundException("collection", collection_id)
            if collection.shared_to_community_id:
                logger.warning(
                    "Collection %s re-shared; previous community fork %s is no longer linked",
                    collection_id,
                    collection.shared_to_community_id,
                )
            community = await self._community_repo.create_with_items(
                CollectionDraft(
                    user_id=user_id,
                    name=collection.name,
                    description=collection.description,
                    category=collection.category,
                    template=collection.template,
                    custom_field_definitions=copy_field_definitions(
                        collection.custom_field_definitions
                    ),
                    cover_image=collection.cover_image,
                    cover_image_fit=collection.cover_image_fit,
                    tags=list(collection.tags),
                    items=item_drafts(collection.items),
                )
            )
            await self._collection_repo.set_shared_to_community(collection_id, community.id)
        logger.info(
            "Shared collection %s to community as %s (%d items)",
            collection_id,
            community.id,
            len(community.items),
        )
        await self._achievements.check_best_effort(user_id)
        return community

    async def unshare(self, collection_id: str, user_id: str) -> None:
        """Delete the live community fork with its items and clear the link.

        Raises:
            ResourceNotFoundException: Collection not owned, or the fork is already gone.
            ValidationException: Collection is not shared.
            AuthorizationException: The linked fork belongs to someone else.
        """
        async with self._uow.transaction():
            collection = await self._collection_repo.get_by_id_and_user(
                collection_id, user_id
            )
            if collection is None:
                raise ResourceNotFoundException("collection", collection_id)
            community_id = collection.shared_to_community_id
            if not community_id:
                raise ValidationException(
                    "Collection is not shared to community",
                    field="shared_to_community_id",
                )
            community = await self._community_repo.get_by_id(community_id)
            if community is None:
                raise ResourceNotFoundException("community_collection", community_id)
            if community.user_id != user_id:
                raise AuthorizationException("community_collection", "unshare")
            await self._community_repo.delete_with_dependents(community_id)
            await self._collection_repo.set_shared_to_community(collection_id, None)
        logger.info("Unshared collection %s (deleted community collection %s)", collection_id, community_id)
