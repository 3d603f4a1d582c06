"""Achievement persistence: apply unlocks idempotently and expose the catalog view."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from colletro.application.dtos.achievement import AchievementStatus
from colletro.application.interfaces.repositories import IStatsRepository, IUserRepository
from colletro.application.interfaces.services import IUnitOfWork
from colletro.application.services.achievement_engine import evaluate, newly_unlocked
from colletro.domain.achievements import ACHIEVEMENTS
from colletro.domain.exceptions import ResourceNotFoundException
from colletro.shared.utils.datetime import utc_now

logger = logging.getLogger(__name__)


class AchievementService:
    """Reads statistics, diffs against the stored set, and appends new unlocks.

    The stored set only grows: apply_unlocks writes already + newly and
    never drops an id, even when statistics regress.
    """

    def __init__(
        self,
        user_repo: IUserRepository,
        stats_repo: IStatsRepository,
        uow: IUnitOfWork,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._user_repo = user_repo
        self._stats_repo = stats_repo
        self._uow = uow
        self._clock = clock

    async def apply_unlocks(self, user_id: str) -> list[str]:
        """Persist achievements whose thresholds are now met; return the new ones.

        Raises:
            ResourceNotFoundException: If the user does not exist.
        """
        async with self._uow.transaction():
            stats = await self._stats_repo.get_user_stats(user_id, self._clock())
            if stats is None:
                raise ResourceNotFoundException("user", user_id)
            already = await self._user_repo.get_achievements_for_update(user_id)
            if already is None:
                raise ResourceNotFoundException("user", user_id)
            newly = newly_unlocked(evaluate(stats), already)
            if newly:
                await self._user_repo.set_achievements(user_id, already + newly)
                logger.info(
                    "Unlocked achievements for user %s: %s", user_id, ", ".join(newly)
                )
        return newly

    async def check_best_effort(self, user_id: str) -> list[str]:
        """Run apply_unlocks after a committed action; failures log and return []."""
        try:
            return await self.apply_unlocks(user_id)
        except Exception:
            logger.exception("Achievement check failed for user %s", user_id)
            return []

    async def list_for_user(self, user_id: str) -> list[AchievementStatus]:
        """Return the full catalog with unlocked flags for user."""
        user = await self._user_repo.get_by_id(user_id)
        if user is None:
            raise ResourceNotFoundException("user", user_id)
        unlocked = set(user.achievements)
        return [
            AchievementStatus(
                id=a.id,
                name=a.name,
                description=a.description,
                badge=a.badge,
                category=a.category.value,
                rarity=a.rarity.value,
                unlocked=a.id in unlocked,
            )
            for a in ACHIEVEMENTS
        ]
