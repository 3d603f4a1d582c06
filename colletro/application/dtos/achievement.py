"""DTOs for achievement evaluation (no dependency on ORM)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserStats:
    """Aggregated statistics over one user's collections and items.

    Percent values are 0-100. Everything the rule engine needs; nothing
    else is read when evaluating achievements.
    """

    collection_count: int = 0
    collections_with_covers: int = 0
    distinct_categories: int = 0
    completed_collections: int = 0
    best_collection_percent: float = 0.0
    overall_percent: float = 0.0
    total_items: int = 0
    owned_items: int = 0
    items_with_notes: int = 0
    items_with_images: int = 0
    items_with_ratings: int = 0
    items_with_log_dates: int = 0
    community_collections_added: int = 0
    community_shares: int = 0
    folders_created: int = 0
    account_age_days: int = 0


@dataclass(frozen=True)
class AchievementStatus:
    """Catalog entry plus whether the user has unlocked it."""

    id: str
    name: str
    description: str
    badge: str
    category: str
    rarity: str
    unlocked: bool
