"""Application services (achievement engine and persistence)."""

from colletro.application.services.achievement_engine import evaluate, newly_unlocked
from colletro.application.services.achievement_service import AchievementService

__all__ = ["AchievementService", "evaluate", "newly_unlocked"]
