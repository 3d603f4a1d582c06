"""Folder API: list, create, rename, move, delete."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from colletro.api.v1.dependencies import CurrentUser, get_folder_service
from colletro.application.use_cases.folders import FolderService
from colletro.core.limiter import limit_writes
from colletro.schemas.folder import (
    FolderCreateRequest,
    FolderMoveRequest,
    FolderRenameRequest,
    FolderResponse,
)

router = APIRouter()

Folders = Annotated[FolderService, Depends(get_folder_service)]


@router.get("", response_model=list[FolderResponse])
async def list_folders(auth: CurrentUser, service: Folders):
    folders = await service.list_folders(auth.user_id)
    return [FolderResponse.model_validate(f) for f in folders]


@router.post("", response_model=FolderResponse, status_code=201)
@limit_writes
async def create_folder(
    request: Request,
    body: FolderCreateRequest,
    auth: CurrentUser,
    service: Folders,
):
    """Create a folder; parent_id, when given, must be one of the caller's folders."""
    folder = await service.create_folder(auth.user_id, body.name, body.parent_id)
    return FolderResponse.model_validate(folder)


@router.patch("/{folder_id}", response_model=FolderResponse)
@limit_writes
async def rename_folder(
    request: Request,
    folder_id: str,
    body: FolderRenameRequest,
    auth: CurrentUser,
    service: Folders,
):
    folder = await service.rename_folder(folder_id, auth.user_id, body.name)
    return FolderResponse.model_validate(folder)


@router.post("/{folder_id}/move", response_model=FolderResponse)
@limit_writes
async def move_folder(
    request: Request,
    folder_id: str,
    body: FolderMoveRequest,
    auth: CurrentUser,
    service: Folders,
):
    """Re-parent a folder; moving it under itself or a descendant is rejected."""
    folder = await service.move_folder(folder_id, auth.user_id, body.parent_id)
    return FolderResponse.model_validate(folder)


@router.delete("/{folder_id}", status_code=204)
@limit_writes
async def delete_folder(
    request: Request,
    folder_id: str,
    auth: CurrentUser,
    service: Folders,
):
    """Delete a folder. Its collections are unfiled and its subfolders move up one level."""
    await service.delete_folder(folder_id, auth.user_id)
