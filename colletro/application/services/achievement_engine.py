"""Achievement rule engine: pure mapping from user statistics to achievement ids.

No I/O. evaluate() is deterministic: the same UserStats always yields the
same set.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from colletro.application.dtos.achievement import UserStats
from colletro.domain.achievements import ACHIEVEMENTS, canonical_order

Rule = Callable[[UserStats], bool]


def _at_least(stat: str, threshold: float) -> Rule:
    def rule(stats: UserStats) -> bool:
        return getattr(stats, stat) >= threshold

    return rule


def _all_covers(stats: UserStats) -> bool:
    return stats.collection_count > 0 and stats.collections_with_covers >= stats.collection_count


RULES: dict[str, Rule] = {
    "first_collection": _at_least("collection_count", 1),
    "five_collections": _at_least("collection_count", 5),
    "ten_collections": _at_least("collection_count", 10),
    "twenty_five_collections": _at_least("collection_count", 25),
    "fifty_collections": _at_least("collection_count", 50),
    "hundred_collections": _at_least("collection_count", 100),
    "ten_items": _at_least("total_items", 10),
    "fifty_items": _at_least("total_items", 50),
    "hundred_items": _at_least("total_items", 100),
    "five_hundred_items": _at_least("total_items", 500),
    "thousand_items": _at_least("total_items", 1000),
    "five_thousand_items": _at_least("total_items", 5000),
    "ten_owned": _at_least("owned_items", 10),
    "fifty_owned": _at_least("owned_items", 50),
    "hundred_owned": _at_least("owned_items", 100),
    "five_hundred_owned": _at_least("owned_items", 500),
    "thousand_owned": _at_least("owned_items", 1000),
    "five_thousand_owned": _at_least("owned_items", 5000),
    "first_complete": _at_least("completed_collections", 1),
    "five_complete": _at_least("completed_collections", 5),
    "ten_complete": _at_least("completed_collections", 10),
    "twenty_complete": _at_least("completed_collections", 20),
    "fifty_percent": _at_least("best_collection_percent", 50),
    "seventy_five_percent": _at_least("best_collection_percent", 75),
    "ninety_percent": _at_least("best_collection_percent", 90),
    "overall_fifty": _at_least("overall_percent", 50),
    "overall_seventy_five": _at_least("overall_percent", 75),
    "overall_ninety": _at_least("overall_percent", 90),
    "three_categories": _at_least("distinct_categories", 3),
    "five_categories": _at_least("distinct_categories", 5),
    "ten_categories": _at_least("distinct_categories", 10),
    "first_recommended": _at_least("community_collections_added", 1),
    "five_recommended": _at_least("community_collections_added", 5),
    "ten_recommended": _at_least("community_collections_added", 10),
    "first_share": _at_least("community_shares", 1),
    "cover_images": _at_least("collections_with_covers", 5),
    "all_covers": _all_covers,
    "item_images": _at_least("items_with_images", 50),
    "notes_master": _at_least("items_with_notes", 25),
    "rating_master": _at_least("items_with_ratings", 50),
    "log_dates": _at_least("items_with_log_dates", 25),
    "first_folder": _at_least("folders_created", 1),
    "veteran": _at_least("account_age_days", 180),
    "dedicated": _at_least("account_age_days", 365),
}


def evaluate(stats: UserStats) -> frozenset[str]:
    """Return every achievement id whose threshold is met by stats."""
    return frozenset(a.id for a in ACHIEVEMENTS if RULES[a.id](stats))


def newly_unlocked(should: Iterable[str], already: Iterable[str]) -> list[str]:
    """Return should minus already, in canonical catalog order."""
    return canonical_order(set(should) - set(already))
