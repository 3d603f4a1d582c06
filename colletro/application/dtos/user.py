"""DTOs for user use cases (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class UserResult:
    """User read-model. Achievements are in canonical order."""

    id: str
    email: str | None
    name: str | None
    image: str | None
    badge: str | None
    is_admin: bool
    is_verified: bool
    is_private: bool
    achievements: list[str]
    created_at: datetime | None = None


@dataclass(frozen=True)
class UserStatus:
    """Cached flags used for authorization decisions."""

    is_admin: bool
    is_verified: bool


@dataclass(frozen=True)
class AuthContext:
    """Resolved caller identity."""

    user_id: str
    is_admin: bool
