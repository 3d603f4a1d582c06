"""Field-preserving copies between personal, community and recommended collections."""

from __future__ import annotations

import copy
from collections.abc import Iterable
from typing import Any

from colletro.application.dtos.collection import CatalogItemResult, ItemDraft, ItemResult


def copy_custom_fields(values: dict[str, Any] | None) -> dict[str, Any] | None:
    """Deep copy a JSON custom-field mapping so the fork shares no state with its source."""
    return copy.deepcopy(values) if values is not None else None


def copy_field_definitions(
    definitions: list[dict[str, Any]] | None,
) -> list[dict[str, Any]] | None:
    return copy.deepcopy(definitions) if definitions is not None else None


def item_drafts(items: Iterable[ItemResult | CatalogItemResult]) -> list[ItemDraft]:
    """Structural copy of items with ownership reset to False."""
    return [
        ItemDraft(
            name=item.name,
            number=item.number,
            notes=item.notes,
            image=item.image,
            is_owned=False,
            custom_fields=copy_custom_fields(item.custom_fields),
        )
        for item in items
    ]


def item_key(number: int | None, name: str) -> tuple[str, str]:
    """Identity of an item within a collection: (number or "", name).

    Number 0 keys like a missing number.
    """
    return (str(number) if number else "", name)
