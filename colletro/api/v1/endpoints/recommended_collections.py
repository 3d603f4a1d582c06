"""Recommended collection API: add to account and admin bulk item images."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from colletro.api.v1.dependencies import (
    AdminUser,
    CurrentUser,
    get_bulk_item_image_service,
    get_clone_service,
)
from colletro.api.v1.endpoints._responses import add_to_account_response
from colletro.application.dtos.admin import ImageUpdate
from colletro.application.use_cases.admin import BulkItemImageService
from colletro.application.use_cases.collections import CloneService
from colletro.core.limiter import limit_admin_bulk, limit_writes
from colletro.domain.enums import SourceKind
from colletro.schemas.admin import BulkImageUpdateRequest, BulkImageUpdateResponse
from colletro.schemas.collection import AddToAccountResponse, CatalogItemResponse

router = APIRouter()


@router.post(
    "/{collection_id}/add-to-account",
    response_model=AddToAccountResponse,
    status_code=201,
)
@limit_writes
async def add_recommended_collection_to_account(
    request: Request,
    collection_id: str,
    auth: CurrentUser,
    service: Annotated[CloneService, Depends(get_clone_service)],
):
    """Clone a recommended collection into the caller's account (keeps recommended lineage)."""
    result = await service.add_to_account(collection_id, auth.user_id, SourceKind.RECOMMENDED)
    return add_to_account_response(result)


@router.post("/{collection_id}/items/bulk-images", response_model=BulkImageUpdateResponse)
@limit_admin_bulk
async def bulk_update_item_images(
    request: Request,
    collection_id: str,
    body: BulkImageUpdateRequest,
    _: AdminUser,
    service: Annotated[BulkItemImageService, Depends(get_bulk_item_image_service)],
):
    """Set many item images at once; any foreign item id rejects the whole batch."""
    result = await service.update_item_images(
        collection_id,
        [ImageUpdate(item_id=u.item_id, image=u.image) for u in body.updates],
    )
    return BulkImageUpdateResponse(
        updated=result.updated,
        items=[CatalogItemResponse.model_validate(i) for i in result.items],
    )
