"""Admin: set a user's verified flag."""

from __future__ import annotations

import logging

from colletro.application.dtos.user import UserResult
from colletro.application.interfaces.repositories import IUserRepository
from colletro.application.interfaces.services import IUnitOfWork, IUserStatusCache
from colletro.domain.exceptions import ResourceNotFoundException, ValidationException

logger = logging.getLogger(__name__)


class UserVerificationService:
    def __init__(
        self,
        user_repo: IUserRepository,
        uow: IUnitOfWork,
        status_cache: IUserStatusCache,
    ) -> None:
        self._user_repo = user_repo
        self._uow = uow
        self._status_cache = status_cache

    async def set_user_verified(self, user_id: str, is_verified: object) -> UserResult:
        """Set is_verified and drop the cached status for user.

        Raises:
            ValidationException: is_verified is not a bool.
            ResourceNotFoundException: Unknown user.
        """
        if not isinstance(is_verified, bool):
            raise ValidationException("isVerified must be a boolean", field="is_verified")
        async with self._uow.transaction():
            user = await self._user_repo.set_verified(user_id, is_verified)
            if user is None:
                raise ResourceNotFoundException("user", user_id)
        await self._status_cache.invalidate(user_id)
        logger.info("User %s verified=%s", user_id, is_verified)
        return user
