"""DTOs for item batch use cases (no dependency on ORM)."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ImportItemsResult:
    """Outcome of a bulk item import; duplicates are skipped, not errors."""

    created: int
    skipped: int
    newly_unlocked: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class ItemBatchResult:
    """Outcome of an ownership toggle or delete over a batch of items."""

    affected: int
    newly_unlocked: list[str] = field(default_factory=list)
