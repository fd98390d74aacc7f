"""FastAPI authentication dependencies for route protection."""

import logging
import uuid

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from revportal.auth.security import ACCESS, InvalidTokenError, token_subject
from revportal.database import get_db
from revportal.models.user import User

logger = logging.getLogger(__name__)

# Strict bearer — raises 403 automatically if no token provided
_bearer_scheme = HTTPBearer()


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def load_active_user(db: AsyncSession, user_id: uuid.UUID) -> User:
    """Fetch a user by id, rejecting unknown and deactivated accounts with 401."""
    result = await db.execute(select(User).where(User.id == user_id))
    user = result.scalar_one_or_none()

    if user is None:
        raise _unauthorized("Could not validate credentials")
    if not user.is_active:
        raise _unauthorized("User account is inactive")
    return user


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(_bearer_scheme),
    db: AsyncSession = Depends(get_db),
) -> User:
    """Resolve the Bearer access token to an active user.

    Raises:
        HTTPException 401: If the token is invalid, expired, wrong type, or the user
            is missing or inactive.
    """
    try:
        user_id = token_subject(credentials.credentials, ACCESS)
    except InvalidTokenError as exc:
        raise _unauthorized(str(exc)) from None

    return await load_active_user(db, user_id)


async def require_editor(user: User = Depends(get_current_user)) -> User:
    """Allow administrators and editors; viewers get 403."""
    if not user.can_edit:
        logger.info("User %s (%s) denied write access", user.id, user.role)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Editor or administrator role required",
        )
    return user


async def require_administrator(user: User = Depends(get_current_user)) -> User:
    """Allow administrators only."""
    if not user.is_administrator:
        logger.info("User %s (%s) denied administrator access", user.id, user.role)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Administrator role required",
        )
    return user
