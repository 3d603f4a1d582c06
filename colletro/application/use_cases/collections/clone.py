"""Clone a community or recommended collection into a user's account."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from colletro.application.dtos.collection import (
    CloneResult,
    CloneSource,
    CollectionDraft,
)
from colletro.application.interfaces.repositories import (
    ICollectionRepository,
    ICommunityCollectionRepository,
    IRecommendedCollectionRepository,
)
from colletro.application.interfaces.services import IUnitOfWork
from colletro.application.services.achievement_service import AchievementService
from colletro.application.use_cases.collections.drafts import (
    copy_field_definitions,
    item_drafts,
)
from colletro.core.constants import COVER_FIT_CONTAIN, COVER_FIT_COVER
from colletro.domain.enums import SourceKind
from colletro.domain.exceptions import ResourceNotFoundException
from colletro.shared.utils.datetime import utc_now

logger = logging.getLogger(__name__)

_DEFAULT_FIT = {
    SourceKind.COMMUNITY: COVER_FIT_COVER,
    SourceKind.RECOMMENDED: COVER_FIT_CONTAIN,
}


def build_clone_draft(source: CloneSource, user_id: str, now: datetime) -> CollectionDraft:
    """Build the new personal collection for a clone source.

    Template, field schema, cover fit and item custom fields are copied
    verbatim; ownership flags, share links and tokens never are.
    """
    data = source.data
    lineage: dict[str, object] = {}
    match source.kind:
        case SourceKind.RECOMMENDED:
            lineage = {"recommended_collection_id": data.id, "last_synced_at": now}
        case SourceKind.COMMUNITY:
            lineage = {"community_collection_id": data.id}
    return CollectionDraft(
        user_id=user_id,
        name=data.name,
        description=data.description,
        category=data.category,
        template=data.template,
        custom_field_definitions=copy_field_definitions(data.custom_field_definitions),
        cover_image=data.cover_image,
        cover_image_fit=data.cover_image_fit or _DEFAULT_FIT[source.kind],
        tags=list(data.tags),
        items=item_drafts(data.items),
        **lineage,
    )


class CloneService:
    """AddToAccount for both source kinds through a single clone path."""

    def __init__(
        self,
        collection_repo: ICollectionRepository,
        community_repo: ICommunityCollectionRepository,
        recommended_repo: IRecommendedCollectionRepository,
        uow: IUnitOfWork,
        achievements: AchievementService,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._collection_repo = collection_repo
        self._community_repo = community_repo
        self._recommended_repo = recommended_repo
        self._uow = uow
        self._achievements = achievements
        self._clock = clock

    async def load_source(self, kind: SourceKind, source_id: str) -> CloneSource:
        """Resolve a source id of the given kind. Raises ResourceNotFoundException."""
        if kind is SourceKind.RECOMMENDED:
            recommended = await self._recommended_repo.get_by_id(source_id)
            if recommended is None:
                raise ResourceNotFoundException("recommended_collection", source_id)
            return CloneSource.recommended(recommended)
        community = await self._community_repo.get_by_id(source_id)
        if community is None:
            raise ResourceNotFoundException("community_collection", source_id)
        return CloneSource.community(community)

    async def add_to_account(
        self, source_id: str, user_id: str, kind: SourceKind
    ) -> CloneResult:
        """Copy the source into a new collection owned by user_id."""
        async with self._uow.transaction():
            source = await self.load_source(kind, source_id)
            collection = await self._collection_repo.create_with_items(
                build_clone_draft(source, user_id, self._clock())
            )
        logger.info(
            "Cloned %s collection %s into %s for user %s",
            kind.value,
            source_id,
            collection.id,
            user_id,
        )
        newly = await self._achievements.check_best_effort(user_id)
        return CloneResult(collection=collection, newly_unlocked=newly)
