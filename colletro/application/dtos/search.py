"""DTOs for external metadata search (no dependency on ORM)."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class CandidateResult:
    """One search hit from a metadata source."""

    source_id: str
    external_id: str
    name: str
    number: str | None = None
    image: str | None = None
    description: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)
