"""Community collection API: add to account, votes, reports."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from colletro.api.v1.dependencies import (
    CurrentUser,
    OptionalUser,
    get_clone_service,
    get_community_engagement_service,
)
from colletro.api.v1.endpoints._responses import add_to_account_response
from colletro.application.use_cases.collections import (
    CloneService,
    CommunityEngagementService,
)
from colletro.core.limiter import limit_share, limit_writes
from colletro.domain.enums import SourceKind
from colletro.schemas.collection import AddToAccountResponse
from colletro.schemas.community import (
    ReportRequest,
    ReportResponse,
    ReportSummary,
    VoteRequest,
    VoteResponse,
)

router = APIRouter()


@router.post(
    "/{collection_id}/add-to-account",
    response_model=AddToAccountResponse,
    status_code=201,
)
@limit_writes
async def add_community_collection_to_account(
    request: Request,
    collection_id: str,
    auth: CurrentUser,
    service: Annotated[CloneService, Depends(get_clone_service)],
):
    """Clone a community collection (schema and items, nothing owned) into the caller's account."""
    result = await service.add_to_account(collection_id, auth.user_id, SourceKind.COMMUNITY)
    return add_to_account_response(result)


@router.get("/{collection_id}/vote", response_model=VoteResponse)
async def get_votes(
    collection_id: str,
    auth: OptionalUser,
    service: Annotated[CommunityEngagementService, Depends(get_community_engagement_service)],
):
    """Vote totals; includes the caller's own vote when a valid token is sent."""
    summary = await service.get_votes(collection_id, auth.user_id if auth else None)
    return VoteResponse.model_validate(summary)


@router.post("/{collection_id}/vote", response_model=VoteResponse)
@limit_writes
async def toggle_vote(
    request: Request,
    collection_id: str,
    auth: CurrentUser,
    service: Annotated[CommunityEngagementService, Depends(get_community_engagement_service)],
    body: VoteRequest | None = None,
):
    """Upvote, or withdraw the caller's existing upvote."""
    vote_type = body.vote_type if body is not None else "upvote"
    summary = await service.toggle_upvote(collection_id, auth.user_id, vote_type)
    return VoteResponse.model_validate(summary)


@router.post("/{collection_id}/report", response_model=ReportResponse, status_code=201)
@limit_share
async def report_collection(
    request: Request,
    collection_id: str,
    body: ReportRequest,
    auth: CurrentUser,
    service: Annotated[CommunityEngagementService, Depends(get_community_engagement_service)],
):
    """File a moderation report; one per user and collection."""
    report = await service.report(collection_id, auth.user_id, body.reason, body.description)
    return ReportResponse(report=ReportSummary.model_validate(report))
