"""Domain layer: achievement catalog, enums, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from colletro.domain.achievements import (
    ACHIEVEMENTS,
    Achievement,
    canonical_order,
    get_achievement,
    parse_achievements,
)
from colletro.domain.enums import AchievementCategory, Rarity, SourceKind
from colletro.domain.exceptions import (
    AuthenticationException,
    AuthorizationException,
    ColletroException,
    FolderCycleException,
    MetadataSourceTimeoutException,
    ResourceNotFoundException,
    SqlNotConfiguredException,
    ValidationException,
)

__all__ = [
    # Achievements
    "ACHIEVEMENTS",
    "Achievement",
    "canonical_order",
    "get_achievement",
    "parse_achievements",
    # Enums
    "AchievementCategory",
    "Rarity",
    "SourceKind",
    # Exceptions
    "AuthenticationException",
    "AuthorizationException",
    "ColletroException",
    "FolderCycleException",
    "MetadataSourceTimeoutException",
    "ResourceNotFoundException",
    "SqlNotConfiguredException",
    "ValidationException",
]
