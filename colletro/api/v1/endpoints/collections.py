"""Personal collection API: reads, public links, community share/unshare, sync, move."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from colletro.api.v1.dependencies import (
    CurrentUser,
    get_collection_queries,
    get_community_sync_service,
    get_folder_service,
    get_public_share_service,
    get_recommended_sync_service,
)
from colletro.application.use_cases.collections import (
    CollectionQueries,
    CommunitySyncService,
    PublicShareService,
    RecommendedSyncService,
)
from colletro.application.use_cases.folders import FolderService
from colletro.core.limiter import limit_share, limit_writes
from colletro.schemas.collection import (
    CollectionResponse,
    CommunityCollectionResponse,
    MoveCollectionRequest,
    SharedCollectionResponse,
    ShareSettingsRequest,
    ShareSettingsResponse,
    SuccessResponse,
    SyncRequest,
    SyncResponse,
    UpdateCheckResponse,
)

router = APIRouter()


@router.get("", response_model=list[CollectionResponse])
async def list_collections(
    auth: CurrentUser,
    queries: Annotated[CollectionQueries, Depends(get_collection_queries)],
):
    """List the caller's collections with items (concurrent identical calls share one read)."""
    collections = await queries.list_collections(auth.user_id)
    return [CollectionResponse.model_validate(c) for c in collections]


@router.get("/share/{share_token}", response_model=SharedCollectionResponse)
async def get_shared_collection(
    share_token: str,
    service: Annotated[PublicShareService, Depends(get_public_share_service)],
):
    """Read a collection through its public link; no authentication required."""
    shared = await service.get_shared_collection(share_token)
    return SharedCollectionResponse.model_validate(shared)


@router.get("/{collection_id}", response_model=CollectionResponse)
async def get_collection(
    collection_id: str,
    auth: CurrentUser,
    queries: Annotated[CollectionQueries, Depends(get_collection_queries)],
):
    collection = await queries.get_collection(collection_id, auth.user_id)
    return CollectionResponse.model_validate(collection)


@router.post(
    "/{collection_id}/share-to-community",
    response_model=CommunityCollectionResponse,
    status_code=201,
)
@limit_share
async def share_to_community(
    request: Request,
    collection_id: str,
    auth: CurrentUser,
    service: Annotated[CommunitySyncService, Depends(get_community_sync_service)],
):
    """Publish a structural copy of the collection to the community catalog."""
    shared = await service.share(collection_id, auth.user_id)
    return CommunityCollectionResponse.model_validate(shared)


@router.post("/{collection_id}/unshare-from-community", response_model=SuccessResponse)
@limit_share
async def unshare_from_community(
    request: Request,
    collection_id: str,
    auth: CurrentUser,
    service: Annotated[CommunitySyncService, Depends(get_community_sync_service)],
):
    """Remove the community copy (and its items, votes, reports) and clear the link."""
    await service.unshare(collection_id, auth.user_id)
    return SuccessResponse()


@router.post("/{collection_id}/sync", response_model=SyncResponse)
@limit_writes
async def sync_collection(
    request: Request,
    collection_id: str,
    auth: CurrentUser,
    service: Annotated[RecommendedSyncService, Depends(get_recommended_sync_service)],
    body: SyncRequest | None = None,
):
    """Pull new items and refreshed fields from the recommended source."""
    preserve = body.preserve_customizations if body is not None else False
    result = await service.sync_from_recommended(
        collection_id, auth.user_id, preserve_customizations=preserve
    )
    return SyncResponse(
        collection=CollectionResponse.model_validate(result.collection),
        items_added=result.items_added,
        items_updated=result.items_updated,
    )


@router.post("/{collection_id}/move", response_model=SuccessResponse)
@limit_writes
async def move_collection(
    request: Request,
    collection_id: str,
    body: MoveCollectionRequest,
    auth: CurrentUser,
    service: Annotated[FolderService, Depends(get_folder_service)],
):
    """File the collection into a folder, or unfile it when folder_id is null."""
    await service.move_collection(collection_id, auth.user_id, body.folder_id)
    return SuccessResponse()


@router.get("/{collection_id}/check-updates", response_model=UpdateCheckResponse)
async def check_for_updates(
    collection_id: str,
    auth: CurrentUser,
    service: Annotated[RecommendedSyncService, Depends(get_recommended_sync_service)],
):
    """Report whether the recommended source changed since the last sync, without syncing."""
    result = await service.check_for_updates(collection_id, auth.user_id)
    return UpdateCheckResponse.model_validate(result)


@router.get("/{collection_id}/share", response_model=ShareSettingsResponse)
async def get_share_settings(
    collection_id: str,
    auth: CurrentUser,
    service: Annotated[PublicShareService, Depends(get_public_share_service)],
):
    settings = await service.get_share_settings(collection_id, auth.user_id)
    return ShareSettingsResponse.model_validate(settings)


@router.post("/{collection_id}/share", response_model=ShareSettingsResponse)
@limit_share
async def update_share_settings(
    request: Request,
    collection_id: str,
    body: ShareSettingsRequest,
    auth: CurrentUser,
    service: Annotated[PublicShareService, Depends(get_public_share_service)],
):
    """Turn the public link on (minting a token once) or off (token kept)."""
    settings = await service.update_share_settings(
        collection_id, auth.user_id, body.is_public
    )
    return ShareSettingsResponse.model_validate(settings)
