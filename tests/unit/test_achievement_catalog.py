"""Achievement catalog, canonical ordering and stored-set parsing."""

from colletro.application.services.achievement_engine import RULES
from colletro.domain.achievements import (
    ACHIEVEMENTS,
    canonical_order,
    get_achievement,
    parse_achievements,
)


def test_catalog_ids_are_unique_and_every_one_has_a_rule() -> None:
    ids = [a.id for a in ACHIEVEMENTS]
    assert len(ids) == len(set(ids))
    assert set(ids) == set(RULES)


def test_get_achievement_known_and_unknown() -> None:
    first = get_achievement("first_collection")
    assert first is not None
    assert first.name == "Getting Started"
    assert get_achievement("no_such_thing") is None


def test_canonical_order_follows_catalog_and_drops_duplicates() -> None:
    ordered = canonical_order(["ten_items", "first_collection", "ten_items", "first_share"])
    assert ordered == ["first_collection", "ten_items", "first_share"]


def test_canonical_order_puts_unknown_ids_last_alphabetically() -> None:
    ordered = canonical_order(["zeta_legacy", "first_folder", "alpha_legacy"])
    assert ordered == ["first_folder", "alpha_legacy", "zeta_legacy"]


def test_parse_achievements_accepts_json_string() -> None:
    assert parse_achievements('["ten_items", "first_collection"]') == [
        "ten_items",
        "first_collection",
    ]


def test_parse_achievements_dedups_keeping_first_occurrence() -> None:
    assert parse_achievements(["a", "b", "a", "c", "b"]) == ["a", "b", "c"]


def test_parse_achievements_malformed_values_parse_as_empty() -> None:
    assert parse_achievements("not json") == []
    assert parse_achievements('{"a": 1}') == []
    assert parse_achievements(None) == []
    assert parse_achievements(42) == []


def test_parse_achievements_skips_non_string_entries() -> None:
    assert parse_achievements(["a", 1, None, "b"]) == ["a", "b"]
