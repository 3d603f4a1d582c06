"""DTOs for community votes and content reports (no dependency on ORM)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class VoteSummary:
    """Vote totals for a community collection and the caller's own vote.

    user_vote is "upvote" when the caller has upvoted, otherwise None
    (also None for anonymous callers).
    """

    upvotes: int
    score: int
    user_vote: str | None = None


@dataclass(frozen=True)
class ReportResult:
    id: str
    status: str
