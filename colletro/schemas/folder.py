"""Folder API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class FolderCreateRequest(BaseModel):
    """Request body for creating a folder."""

    name: str = Field(..., min_length=1, max_length=255)
    parent_id: str | None = Field(default=None, max_length=64)


class FolderRenameRequest(BaseModel):
    """Request body for renaming a folder."""

    name: str = Field(..., min_length=1, max_length=255)


class FolderMoveRequest(BaseModel):
    """Request body for re-parenting a folder (null moves it to the top level)."""

    parent_id: str | None = Field(default=None, max_length=64)


class FolderResponse(BaseModel):
    """Folder."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    name: str
    parent_id: str | None = None
    created_at: datetime | None = None
