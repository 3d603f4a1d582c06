"""Achievement catalog and stored-set helpers.

The catalog order is the canonical order: any list of achievement ids
produced by the application (newly unlocked, unlocked views) follows it.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import dataclass

from colletro.domain.enums import AchievementCategory, Rarity


@dataclass(frozen=True)
class Achievement:
    """A named milestone unlocked permanently once its statistic threshold is met."""

    id: str
    name: str
    description: str
    badge: str
    category: AchievementCategory
    rarity: Rarity


_C = AchievementCategory
_R = Rarity

ACHIEVEMENTS: tuple[Achievement, ...] = (
    # Collection milestones
    Achievement("first_collection", "Getting Started", "Create your first collection", "🎯", _C.COLLECTION, _R.COMMON),
    Achievement("five_collections", "Collector", "Create 5 collections", "📚", _C.COLLECTION, _R.COMMON),
    Achievement("ten_collections", "Bibliophile", "Create 10 collections", "📖", _C.COLLECTION, _R.UNCOMMON),
    Achievement("twenty_five_collections", "Archivist", "Create 25 collections", "📚", _C.COLLECTION, _R.RARE),
    Achievement("fifty_collections", "Curator", "Create 50 collections", "🏛️", _C.COLLECTION, _R.EPIC),
    Achievement("hundred_collections", "Master Collector", "Create 100 collections", "👑", _C.COLLECTION, _R.LEGENDARY),
    # Item milestones
    Achievement("ten_items", "Small Collection", "Add 10 items to your collections", "📦", _C.ITEMS, _R.COMMON),
    Achievement("fifty_items", "Growing Collection", "Add 50 items to your collections", "📊", _C.ITEMS, _R.COMMON),
    Achievement("hundred_items", "Century Club", "Add 100 items to your collections", "💯", _C.ITEMS, _R.UNCOMMON),
    Achievement("five_hundred_items", "Half a Thousand", "Add 500 items to your collections", "📈", _C.ITEMS, _R.RARE),
    Achievement("thousand_items", "Millennium", "Add 1,000 items to your collections", "🌟", _C.ITEMS, _R.EPIC),
    Achievement("five_thousand_items", "Ultimate Collector", "Add 5,000 items to your collections", "🏆", _C.ITEMS, _R.LEGENDARY),
    # Owned item milestones
    Achievement("ten_owned", "First Steps", "Mark 10 items as owned", "✅", _C.ITEMS, _R.COMMON),
    Achievement("fifty_owned", "Building Up", "Mark 50 items as owned", "📝", _C.ITEMS, _R.COMMON),
    Achievement("hundred_owned", "Centurion", "Mark 100 items as owned", "💎", _C.ITEMS, _R.UNCOMMON),
    Achievement("five_hundred_owned", "Half Grand", "Mark 500 items as owned", "💍", _C.ITEMS, _R.RARE),
    Achievement("thousand_owned", "Grand Master", "Mark 1,000 items as owned", "🎖️", _C.ITEMS, _R.EPIC),
    Achievement("five_thousand_owned", "Legendary Owner", "Mark 5,000 items as owned", "⚡", _C.ITEMS, _R.LEGENDARY),
    # Completion
    Achievement("first_complete", "Completionist", "Complete your first collection (100%)", "🎉", _C.PROGRESS, _R.UNCOMMON),
    Achievement("five_complete", "Perfectionist", "Complete 5 collections (100%)", "✨", _C.PROGRESS, _R.RARE),
    Achievement("ten_complete", "Master Completer", "Complete 10 collections (100%)", "🏅", _C.PROGRESS, _R.EPIC),
    Achievement("twenty_complete", "Ultimate Perfectionist", "Complete 20 collections (100%)", "💫", _C.PROGRESS, _R.LEGENDARY),
    # Progress
    Achievement("fifty_percent", "Halfway There", "Reach 50% completion in a collection", "📊", _C.PROGRESS, _R.COMMON),
    Achievement("seventy_five_percent", "Almost There", "Reach 75% completion in a collection", "📈", _C.PROGRESS, _R.UNCOMMON),
    Achievement("ninety_percent", "So Close", "Reach 90% completion in a collection", "🎯", _C.PROGRESS, _R.RARE),
    Achievement("overall_fifty", "Half Master", "Reach 50% overall completion across all collections", "🌟", _C.PROGRESS, _R.RARE),
    Achievement("overall_seventy_five", "Three Quarters", "Reach 75% overall completion across all collections", "💫", _C.PROGRESS, _R.EPIC),
    Achievement("overall_ninety", "Near Perfect", "Reach 90% overall completion across all collections", "✨", _C.PROGRESS, _R.LEGENDARY),
    # Variety
    Achievement("three_categories", "Diverse Collector", "Create collections in 3 different categories", "🌈", _C.VARIETY, _R.COMMON),
    Achievement("five_categories", "Eclectic Tastes", "Create collections in 5 different categories", "🎨", _C.VARIETY, _R.UNCOMMON),
    Achievement("ten_categories", "Renaissance Collector", "Create collections in 10 different categories", "🎭", _C.VARIETY, _R.RARE),
    # Community
    Achievement("first_recommended", "Community Member", "Add your first community collection", "⭐", _C.SPECIAL, _R.COMMON),
    Achievement("five_recommended", "Community Enthusiast", "Add 5 community collections", "🌟", _C.SPECIAL, _R.UNCOMMON),
    Achievement("ten_recommended", "Community Champion", "Add 10 community collections", "💫", _C.SPECIAL, _R.RARE),
    Achievement("first_share", "Sharing is Caring", "Share a collection with the community", "🤝", _C.SOCIAL, _R.COMMON),
    # Details
    Achievement("cover_images", "Visual Collector", "Add cover images to 5 collections", "🖼️", _C.SPECIAL, _R.UNCOMMON),
    Achievement("all_covers", "Picture Perfect", "Add cover images to all your collections", "🎨", _C.SPECIAL, _R.EPIC),
    Achievement("item_images", "Detail Oriented", "Add images to 50 items", "📸", _C.SPECIAL, _R.RARE),
    Achievement("notes_master", "Note Taker", "Add notes to 25 items", "📝", _C.SPECIAL, _R.UNCOMMON),
    Achievement("rating_master", "Critic", "Rate 50 items", "⭐", _C.SPECIAL, _R.RARE),
    Achievement("log_dates", "Historian", "Log dates for 25 items", "📅", _C.SPECIAL, _R.UNCOMMON),
    Achievement("first_folder", "Organizer", "Create your first folder", "🗂️", _C.SPECIAL, _R.COMMON),
    # Tenure
    Achievement("veteran", "Veteran Collector", "Be a member for 6 months", "🎖️", _C.SPECIAL, _R.EPIC),
    Achievement("dedicated", "Dedicated", "Be a member for 1 year", "💎", _C.SPECIAL, _R.LEGENDARY),
)

ACHIEVEMENTS_BY_ID: dict[str, Achievement] = {a.id: a for a in ACHIEVEMENTS}
_CANONICAL_RANK: dict[str, int] = {a.id: i for i, a in enumerate(ACHIEVEMENTS)}


def get_achievement(achievement_id: str) -> Achievement | None:
    """Return the catalog entry for an id, or None when unknown."""
    return ACHIEVEMENTS_BY_ID.get(achievement_id)


def canonical_order(achievement_ids: Iterable[str]) -> list[str]:
    """Return unique ids sorted by catalog position. Unknown ids sort last, alphabetically."""
    unique = set(achievement_ids)
    return sorted(
        unique,
        key=lambda a: (_CANONICAL_RANK.get(a, len(_CANONICAL_RANK)), a),
    )


def parse_achievements(raw: object) -> list[str]:
    """Parse a stored achievement set into a duplicate-free list, keeping first occurrence.

    Accepts a JSON string or an already-decoded list. Anything malformed
    parses as an empty list.
    """
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except ValueError:
            return []
    if not isinstance(raw, list):
        return []
    seen: set[str] = set()
    result: list[str] = []
    for value in raw:
        if isinstance(value, str) and value not in seen:
            seen.add(value)
            result.append(value)
    return result
