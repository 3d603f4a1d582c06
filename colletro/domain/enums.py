"""Domain enumerations for the Colletro application.

Enums represent fixed sets of domain values (clone source kinds,
achievement categories and rarities, community votes and reports).
"""

from enum import Enum


class SourceKind(str, Enum):
    """Kind of catalog collection a personal collection can be cloned from."""

    COMMUNITY = "community"
    RECOMMENDED = "recommended"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid source kinds as strings."""
        return [kind.value for kind in cls]


class AchievementCategory(str, Enum):
    """Grouping used when displaying achievements."""

    COLLECTION = "collection"
    ITEMS = "items"
    PROGRESS = "progress"
    VARIETY = "variety"
    SOCIAL = "social"
    SPECIAL = "special"


class Rarity(str, Enum):
    """Achievement rarity tier (display only)."""

    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    EPIC = "epic"
    LEGENDARY = "legendary"


class VoteType(str, Enum):
    """Community vote kinds. Only upvotes are accepted."""

    UPVOTE = "upvote"


class ReportReason(str, Enum):
    """Why a community collection was reported."""

    SPAM = "spam"
    INAPPROPRIATE = "inappropriate"
    COPYRIGHT = "copyright"
    OTHER = "other"

    @classmethod
    def values(cls) -> list[str]:
        return [reason.value for reason in cls]
