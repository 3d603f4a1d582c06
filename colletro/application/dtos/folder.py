"""DTOs for folder use cases (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class FolderResult:
    """Folder read-model."""

    id: str
    user_id: str
    name: str
    parent_id: str | None
    created_at: datetime | None = None
