"""DTOs for admin bulk operations (no dependency on ORM)."""

from dataclasses import dataclass, field

from colletro.application.dtos.collection import CatalogItemResult


@dataclass(frozen=True)
class CoverCandidate:
    """A collection that has no cover image yet."""

    id: str
    name: str
    category: str | None


@dataclass
class CoverGenerationResult:
    """Outcome of bulk cover generation.

    generated and updated diverge when a cover is rendered but the
    collection update fails. errors holds one "name: message" entry per
    failed collection.
    """

    total: int = 0
    generated: int = 0
    updated: int = 0
    errors: list[str] = field(default_factory=list)

    @property
    def failed(self) -> int:
        return len(self.errors)


@dataclass(frozen=True)
class ImageUpdate:
    """One (item id, image) pair of a bulk image update."""

    item_id: str
    image: str


@dataclass(frozen=True)
class BulkImageUpdateResult:
    """Outcome of a bulk item image update (always all-or-nothing)."""

    updated: int
    items: list[CatalogItemResult]
