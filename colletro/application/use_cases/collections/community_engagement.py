"""Upvotes and content reports on community collections."""

from __future__ import annotations

import logging

from colletro.application.dtos.collection import CommunityCollectionResult
from colletro.application.dtos.community import ReportResult, VoteSummary
from colletro.application.interfaces.repositories import ICommunityCollectionRepository
from colletro.application.interfaces.services import IUnitOfWork
from colletro.domain.enums import ReportReason, VoteType
from colletro.domain.exceptions import (
    ConflictException,
    ResourceNotFoundException,
    ValidationException,
)

logger = logging.getLogger(__name__)

REPORT_DESCRIPTION_MAX_LENGTH = 1000


class CommunityEngagementService:
    def __init__(
        self,
        community_repo: ICommunityCollectionRepository,
        uow: IUnitOfWork,
    ) -> None:
        self._community_repo = community_repo
        self._uow = uow

    async def _require(self, community_collection_id: str) -> CommunityCollectionResult:
        community = await self._community_repo.get_by_id(community_collection_id)
        if community is None:
            raise ResourceNotFoundException("community_collection", community_collection_id)
        return community

    async def _summary(self, community_collection_id: str, user_id: str | None) -> VoteSummary:
        upvotes, score = await self._community_repo.vote_totals(community_collection_id)
        voted = user_id is not None and await self._community_repo.has_vote(
            community_collection_id, user_id
        )
        return VoteSummary(
            upvotes=upvotes,
            score=score,
            user_vote=VoteType.UPVOTE.value if voted else None,
        )

    async def get_votes(
        self, community_collection_id: str, user_id: str | None = None
    ) -> VoteSummary:
        await self._require(community_collection_id)
        return await self._summary(community_collection_id, user_id)

    async def toggle_upvote(
        self, community_collection_id: str, user_id: str, vote_type: str
    ) -> VoteSummary:
        """Add the caller's upvote, or remove it when already present.

        Raises:
            ValidationException: vote_type is not "upvote".
            ResourceNotFoundException: Unknown community collection.
        """
        if vote_type != VoteType.UPVOTE.value:
            raise ValidationException("Invalid vote type", field="vote_type")
        async with self._uow.transaction():
            await self._require(community_collection_id)
            if await self._community_repo.has_vote(community_collection_id, user_id):
                await self._community_repo.remove_vote(community_collection_id, user_id)
            else:
                await self._community_repo.add_vote(community_collection_id, user_id, 1)
            summary = await self._summary(community_collection_id, user_id)
        return summary

    async def report(
        self,
        community_collection_id: str,
        reporter_id: str,
        reason: str,
        description: str | None = None,
    ) -> ReportResult:
        """File a pending report; each user reports a collection at most once.

        Raises:
            ValidationException: Unknown reason, over-long description, or
                reporting one's own collection.
            ResourceNotFoundException: Unknown community collection.
            ConflictException: The caller already reported this collection.
        """
        if reason not in ReportReason.values():
            raise ValidationException("Invalid report reason", field="reason")
        if description and len(description) > REPORT_DESCRIPTION_MAX_LENGTH:
            raise ValidationException(
                f"Description must be at most {REPORT_DESCRIPTION_MAX_LENGTH} characters",
                field="description",
            )
        async with self._uow.transaction():
            community = await self._require(community_collection_id)
            if community.user_id == reporter_id:
                raise ValidationException("You cannot report your own content", field="reporter_id")
            if await self._community_repo.has_report(community_collection_id, reporter_id):
                raise ConflictException(
                    "You have already reported this collection", resource_type="content_report"
                )
            report = await self._community_repo.create_report(
                community_collection_id, reporter_id, reason, description or None
            )
        logger.info(
            "Community collection %s reported by %s (%s)",
            community_collection_id,
            reporter_id,
            reason,
        )
        return report
