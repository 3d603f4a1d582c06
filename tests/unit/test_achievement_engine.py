"""Achievement rule engine: pure evaluation and canonical diffs."""

from dataclasses import replace

import pytest

from colletro.application.dtos.achievement import UserStats
from colletro.application.services.achievement_engine import evaluate, newly_unlocked


def test_empty_stats_unlock_nothing() -> None:
    assert evaluate(UserStats()) == frozenset()


def test_evaluate_is_deterministic() -> None:
    stats = UserStats(collection_count=5, total_items=120, owned_items=60)
    assert evaluate(stats) == evaluate(stats)


@pytest.mark.parametrize(
    ("stats", "expected"),
    [
        (UserStats(collection_count=1), {"first_collection"}),
        (UserStats(collection_count=4), {"first_collection"}),
        (UserStats(collection_count=5), {"first_collection", "five_collections"}),
        (UserStats(total_items=9), set()),
        (UserStats(total_items=10), {"ten_items"}),
        (UserStats(owned_items=50), {"ten_owned", "fifty_owned"}),
        (UserStats(distinct_categories=3), {"three_categories"}),
        (UserStats(community_collections_added=1), {"first_recommended"}),
        (UserStats(community_shares=1), {"first_share"}),
        (UserStats(folders_created=1), {"first_folder"}),
        (UserStats(account_age_days=179), set()),
        (UserStats(account_age_days=365), {"veteran", "dedicated"}),
    ],
)
def test_threshold_rules(stats: UserStats, expected: set[str]) -> None:
    assert evaluate(stats) == expected


def test_progress_rules_use_percentages() -> None:
    stats = UserStats(best_collection_percent=75.0, overall_percent=50.0)
    assert evaluate(stats) == {"fifty_percent", "seventy_five_percent", "overall_fifty"}


def test_all_covers_requires_at_least_one_collection() -> None:
    assert "all_covers" not in evaluate(UserStats(collection_count=0, collections_with_covers=0))
    unlocked = evaluate(UserStats(collection_count=2, collections_with_covers=2))
    assert "all_covers" in unlocked
    assert "all_covers" not in evaluate(UserStats(collection_count=3, collections_with_covers=2))


def test_more_stats_never_unlock_less() -> None:
    base = UserStats(collection_count=5, total_items=50, owned_items=10)
    grown = replace(base, collection_count=10, total_items=100, owned_items=50)
    assert evaluate(base) <= evaluate(grown)


def test_newly_unlocked_is_difference_in_catalog_order() -> None:
    should = {"ten_items", "first_collection", "first_share", "five_collections"}
    already = ["five_collections"]
    assert newly_unlocked(should, already) == ["first_collection", "ten_items", "first_share"]


def test_newly_unlocked_empty_when_nothing_new() -> None:
    assert newly_unlocked({"first_collection"}, ["first_collection", "ten_items"]) == []
