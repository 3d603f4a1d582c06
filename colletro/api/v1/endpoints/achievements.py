"""Achievement API: catalog with unlock flags and on-demand check."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from colletro.api.v1.dependencies import CurrentUser, get_achievement_service
from colletro.application.services import AchievementService
from colletro.core.limiter import limit_writes
from colletro.schemas.achievement import AchievementCheckResponse, AchievementResponse

router = APIRouter()


@router.get("", response_model=list[AchievementResponse])
async def list_achievements(
    auth: CurrentUser,
    service: Annotated[AchievementService, Depends(get_achievement_service)],
):
    statuses = await service.list_for_user(auth.user_id)
    return [AchievementResponse.model_validate(s) for s in statuses]


@router.post("/check", response_model=AchievementCheckResponse)
@limit_writes
async def check_achievements(
    request: Request,
    auth: CurrentUser,
    service: Annotated[AchievementService, Depends(get_achievement_service)],
):
    """Re-evaluate the caller's statistics and persist anything newly unlocked."""
    newly = await service.apply_unlocks(auth.user_id)
    return AchievementCheckResponse(newly_unlocked_achievements=newly)
