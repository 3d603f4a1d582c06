"""Admin API: bulk cover generation, catalog conversion and user verification."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from colletro.api.v1.dependencies import (
    AdminUser,
    get_bulk_cover_service,
    get_convert_service,
    get_user_verification_service,
)
from colletro.application.use_cases.admin import (
    BulkCoverGenerationService,
    ConvertToRecommendedService,
    UserVerificationService,
)
from colletro.core.limiter import limit_admin_bulk, limit_writes
from colletro.schemas.admin import (
    CoverGenerationResponse,
    UserVerificationRequest,
    UserVerificationResponse,
)
from colletro.schemas.collection import RecommendedCollectionResponse

router = APIRouter()


@router.post("/generate-covers", response_model=CoverGenerationResponse)
@limit_admin_bulk
async def generate_covers(
    request: Request,
    _: AdminUser,
    service: Annotated[BulkCoverGenerationService, Depends(get_bulk_cover_service)],
):
    """Render covers for every collection without one. Per-collection failures are listed."""
    result = await service.generate_missing_covers()
    return CoverGenerationResponse(
        total=result.total,
        generated=result.generated,
        updated=result.updated,
        failed=result.failed,
        errors=result.errors,
    )


@router.post(
    "/collections/{collection_id}/convert-to-recommended",
    response_model=RecommendedCollectionResponse,
    status_code=201,
)
@limit_writes
async def convert_collection_to_recommended(
    request: Request,
    collection_id: str,
    _: AdminUser,
    service: Annotated[ConvertToRecommendedService, Depends(get_convert_service)],
):
    """Copy any user's collection into the recommended catalog."""
    recommended = await service.from_collection(collection_id)
    return RecommendedCollectionResponse.model_validate(recommended)


@router.post(
    "/community-collections/{collection_id}/convert-to-recommended",
    response_model=RecommendedCollectionResponse,
    status_code=201,
)
@limit_writes
async def convert_community_to_recommended(
    request: Request,
    collection_id: str,
    _: AdminUser,
    service: Annotated[ConvertToRecommendedService, Depends(get_convert_service)],
):
    """Copy a community collection into the recommended catalog (cover fit defaults to contain)."""
    recommended = await service.from_community(collection_id)
    return RecommendedCollectionResponse.model_validate(recommended)


@router.patch("/users/{user_id}/verify", response_model=UserVerificationResponse)
@limit_writes
async def set_user_verified(
    request: Request,
    user_id: str,
    body: UserVerificationRequest,
    _: AdminUser,
    service: Annotated[UserVerificationService, Depends(get_user_verification_service)],
):
    user = await service.set_user_verified(user_id, body.is_verified)
    return UserVerificationResponse(id=user.id, is_verified=user.is_verified)
