"""Authentication dependencies: bearer JWT resolved to an AuthContext."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from colletro.application.dtos.user import AuthContext
from colletro.domain.exceptions import AuthenticationException, AuthorizationException
from colletro.infrastructure.cache import UserStatusCache
from colletro.infrastructure.security.jwt import verify_token

from .cache import get_user_status_cache

logger = logging.getLogger(__name__)

_http_bearer = HTTPBearer(auto_error=False)


async def get_auth_context(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
    status_cache: Annotated[UserStatusCache, Depends(get_user_status_cache)],
) -> AuthContext:
    """Return {user_id, is_admin} for the bearer token; raise 401 if missing or invalid.

    Runs before any use case, so an unauthenticated request never reads
    collection data.
    """
    if not credentials:
        raise AuthenticationException()
    try:
        payload = verify_token(credentials.credentials)
    except ValueError:
        raise AuthenticationException("Invalid or expired token") from None
    user_id = payload["sub"]
    status = await status_cache.get_status(user_id)
    if status is None:
        logger.info("Token subject %s does not match a user", user_id)
        raise AuthenticationException("Invalid or expired token")
    return AuthContext(user_id=user_id, is_admin=status.is_admin)


async def get_optional_auth_context(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
    status_cache: Annotated[UserStatusCache, Depends(get_user_status_cache)],
) -> AuthContext | None:
    """AuthContext when a valid bearer token is sent, else None (anonymous read)."""
    if not credentials:
        return None
    try:
        payload = verify_token(credentials.credentials)
    except ValueError:
        return None
    status = await status_cache.get_status(payload["sub"])
    if status is None:
        return None
    return AuthContext(user_id=payload["sub"], is_admin=status.is_admin)


async def require_admin(
    auth: Annotated[AuthContext, Depends(get_auth_context)],
) -> AuthContext:
    """Authenticated caller with the admin flag; raise 403 otherwise."""
    if not auth.is_admin:
        raise AuthorizationException(message="Admin access required")
    return auth


CurrentUser = Annotated[AuthContext, Depends(get_auth_context)]
OptionalUser = Annotated[AuthContext | None, Depends(get_optional_auth_context)]
AdminUser = Annotated[AuthContext, Depends(require_admin)]
