import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from typing_extensions import Annotated
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.db import get_session
from app.api.v1.models import User
from app.api.v1.repositories import UserRepository, get_user_repository
from app.api.v1.schemas import TokenData

logger = logging.getLogger(__name__)

http_bearer = HTTPBearer(auto_error=False)


def _credentials_exception(detail: str = "Could not validate credentials") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def create_access_token(user: User, expires_delta: Optional[timedelta] = None) -> str:
    """
    Create an RS256 access token for ``user``.

    Claims: ``userId`` (internal id), ``userUuid`` (public id), ``iss`` and ``exp``.
    Tokens live for ``ACCESS_TOKEN_EXPIRE_SECONDS`` (30 days) unless ``expires_delta`` is given.
    """
    if not settings.RSA_PRIVATE_KEY:
        raise RuntimeError("RSA_PRIVATE_KEY is not configured")

    now = datetime.now(timezone.utc)
    expire = now + (expires_delta if expires_delta is not None
                    else timedelta(seconds=settings.ACCESS_TOKEN_EXPIRE_SECONDS))
    payload = {
        "userId": user.id,
        "userUuid": str(user.uuid),
        "iss": settings.JWT_ISSUER,
        "iat": int(now.timestamp()),
        "exp": int(expire.timestamp()),
    }
    return jwt.encode(payload, settings.RSA_PRIVATE_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_token(token: str) -> Dict[str, Any]:
    """
    Verify signature, issuer and expiry of an access token and return its claims.

    Raises:
        JWTError: the token is malformed, expired or signed by someone else
    """
    if not settings.RSA_PUBLIC_KEY:
        raise RuntimeError("RSA_PUBLIC_KEY is not configured")

    return jwt.decode(
        token,
        settings.RSA_PUBLIC_KEY,
        algorithms=[settings.JWT_ALGORITHM],
        issuer=settings.JWT_ISSUER,
        options={"require_exp": True},
    )


# Validate JWT token
async def get_current_user(
        credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(http_bearer)],
        db: Annotated[AsyncSession, Depends(get_session)],
        user_repository: Annotated[UserRepository, Depends(get_user_repository)],
) -> User:
    if not credentials or not credentials.credentials:
        raise _credentials_exception("Not authenticated")

    try:
        token_data = TokenData.model_validate(decode_token(credentials.credentials))
    except (JWTError, ValidationError) as e:
        logger.info("Rejected access token: %s", e)
        raise _credentials_exception()

    user = await user_repository.find_by_id(db, token_data.user_id)
    if not user:
        raise _credentials_exception()

    return user
