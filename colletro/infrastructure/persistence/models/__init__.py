"""Persistence models: ORM entities and mixins."""

from colletro.infrastructure.persistence.models.collection import Collection, Item
from colletro.infrastructure.persistence.models.community import (
    CommunityCollection,
    CommunityItem,
    CommunityVote,
    ContentReport,
)
from colletro.infrastructure.persistence.models.folder import Folder
from colletro.infrastructure.persistence.models.misc import (
    BlogPost,
    VerificationToken,
    WishlistItem,
)
from colletro.infrastructure.persistence.models.mixins import (
    BaseModel,
    CuidMixin,
    JSONType,
    TimestampMixin,
)
from colletro.infrastructure.persistence.models.recommended import (
    RecommendedCollection,
    RecommendedItem,
)
from colletro.infrastructure.persistence.models.user import User

__all__ = [
    "BaseModel",
    "BlogPost",
    "Collection",
    "CommunityCollection",
    "CommunityItem",
    "CommunityVote",
    "ContentReport",
    "CuidMixin",
    "Folder",
    "Item",
    "JSONType",
    "RecommendedCollection",
    "RecommendedItem",
    "TimestampMixin",
    "User",
    "VerificationToken",
    "WishlistItem",
]
