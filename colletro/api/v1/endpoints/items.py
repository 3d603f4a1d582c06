"""Item API: bulk import into a collection, bulk ownership, bulk delete."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from colletro.api.v1.dependencies import CurrentUser, get_item_service
from colletro.application.dtos.collection import ItemDraft
from colletro.application.use_cases.items import ItemService
from colletro.core.limiter import limit_writes
from colletro.schemas.item import (
    ItemBatchResponse,
    ItemDeleteRequest,
    ItemImportRequest,
    ItemImportResponse,
    ItemOwnershipRequest,
)

router = APIRouter()

Items = Annotated[ItemService, Depends(get_item_service)]


@router.post(
    "/collections/{collection_id}/items",
    response_model=ItemImportResponse,
    status_code=201,
)
@limit_writes
async def import_items(
    request: Request,
    collection_id: str,
    body: ItemImportRequest,
    auth: CurrentUser,
    service: Items,
):
    """Create many items; entries duplicating (number, name) are skipped."""
    result = await service.import_items(
        collection_id,
        auth.user_id,
        [
            ItemDraft(
                name=entry.name,
                number=entry.number,
                notes=entry.notes,
                image=entry.image,
                is_owned=entry.is_owned,
                custom_fields=entry.custom_fields,
            )
            for entry in body.items
        ],
    )
    return ItemImportResponse(
        created=result.created,
        skipped=result.skipped,
        newly_unlocked_achievements=result.newly_unlocked,
    )


@router.patch("/items/bulk", response_model=ItemBatchResponse)
@limit_writes
async def set_items_owned(
    request: Request,
    body: ItemOwnershipRequest,
    auth: CurrentUser,
    service: Items,
):
    """Mark items owned or not owned. Every id must belong to one of the caller's collections."""
    result = await service.set_items_owned(auth.user_id, body.item_ids, body.is_owned)
    return ItemBatchResponse(
        affected=result.affected,
        newly_unlocked_achievements=result.newly_unlocked,
    )


@router.post("/items/bulk-delete", response_model=ItemBatchResponse)
@limit_writes
async def delete_items(
    request: Request,
    body: ItemDeleteRequest,
    auth: CurrentUser,
    service: Items,
):
    result = await service.delete_items(auth.user_id, body.item_ids)
    return ItemBatchResponse(
        affected=result.affected,
        newly_unlocked_achievements=result.newly_unlocked,
    )
