"""Achievement API schemas."""

from pydantic import BaseModel, ConfigDict, Field


class AchievementResponse(BaseModel):
    """Catalog entry with the caller's unlock flag."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: str
    badge: str
    category: str
    rarity: str
    unlocked: bool


class AchievementCheckResponse(BaseModel):
    """Achievements unlocked by an on-demand check (canonical order)."""

    newly_unlocked_achievements: list[str] = Field(default_factory=list)
