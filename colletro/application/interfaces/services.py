"""Service interfaces (ports) for the application layer.

Protocols define contracts for application services and external
collaborators (DIP).
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from contextlib import AbstractAsyncContextManager
from typing import TYPE_CHECKING, Protocol, TypeVar

if TYPE_CHECKING:
    from colletro.application.dtos.search import CandidateResult
    from colletro.application.dtos.user import UserStatus

T = TypeVar("T")


# Unit of work interface
class IUnitOfWork(Protocol):
    """Protocol for an atomic storage transaction."""

    def transaction(self) -> AbstractAsyncContextManager[None]:
        """Return a context manager; all writes inside commit or roll back together."""


# Cover generator interface
class ICoverGenerator(Protocol):
    """Protocol for rendering a collection cover image."""

    async def generate(self, collection_id: str, name: str, category: str | None) -> str:
        """Render a cover and return its image reference. May raise."""


# Metadata source interface
class IMetadataSource(Protocol):
    """Protocol for an external metadata search provider."""

    source_id: str

    async def search(self, query: str) -> list[CandidateResult]:
        """Return candidates for query (empty list when nothing matches)."""


# Request deduplication interface
class IRequestDeduplicator(Protocol):
    """Protocol for collapsing concurrent identical reads into one fetch."""

    async def run(self, key: str, fetch: Callable[[], Awaitable[T]]) -> T:
        """Return the result of fetch, sharing an in-flight call for the same key."""


# User status cache interface
class IUserStatusCache(Protocol):
    """Protocol for the cached {is_admin, is_verified} lookup."""

    async def get_status(self, user_id: str) -> UserStatus | None:
        """Return cached or freshly loaded status; None when user is unknown."""

    async def invalidate(self, user_id: str) -> None:
        """Drop the cached status so the next lookup reloads it."""
