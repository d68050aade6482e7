from typing import Annotated

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.db import get_session
from app.api.v1.models import User as UserModel
from app.api.v1.schemas import UserProfile
from app.api.v1.services import UserService, get_user_service
from app.core.middlewares import limiter, DEFAULT_RATE_LIMIT
from app.core.schemas import ApiResponse
from app.core.security import get_current_user

prefix = "/users"
router = APIRouter(prefix=prefix)

error_responses = {
    401: {"model": ApiResponse, "description": "Missing or invalid token, or caller is not an admin"},
    404: {"model": ApiResponse, "description": "User not found"},
}


@router.get("/self", response_model=UserProfile, responses=error_responses, summary="Read a user")
@limiter.limit(DEFAULT_RATE_LIMIT)
async def read_self(
        request: Request,
        current_user: Annotated[UserModel, Depends(get_current_user)],
        db: Annotated[AsyncSession, Depends(get_session)],
        user_service: Annotated[UserService, Depends(get_user_service)]
):
    """Read the calling user's details, including roles."""
    return await user_service.get_self_profile(db, current_user)


@router.get("/{user_id}", response_model=UserProfile, responses=error_responses, summary="Read a specific user")
@limiter.limit(DEFAULT_RATE_LIMIT)
async def read_user(
        request: Request,
        user_id: int,
        current_user: Annotated[UserModel, Depends(get_current_user)],
        db: Annotated[AsyncSession, Depends(get_session)],
        user_service: Annotated[UserService, Depends(get_user_service)]
):
    """Read a specific user's details, including roles. Requires the admin role."""
    return await user_service.get_user_profile(db, current_user, user_id)
