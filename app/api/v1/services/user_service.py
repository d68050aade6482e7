import logging
from functools import lru_cache

from sqlalchemy.ext.asyncio import AsyncSession

from app.api.v1.models import User as UserModel
from app.api.v1.repositories import (
    UserRepository,
    UserRolesRepository,
    get_user_repository,
    get_user_roles_repository,
)
from app.api.v1.schemas import UserProfile, build_user_profile
from app.core.config import settings
from app.core.models import InvalidTargetError, NotFoundError, UnauthorizedError

logger = logging.getLogger(__name__)


class UserService:

    def __init__(
            self,
            user_repository: UserRepository,
            user_roles_repository: UserRolesRepository,
            admin_role_name: str = settings.ADMIN_ROLE_NAME,
    ):
        self.user_repository = user_repository
        self.user_roles_repository = user_roles_repository
        self.admin_role_name = admin_role_name

    async def get_profile_with_roles(self, db: AsyncSession, user_id: int) -> UserProfile:
        """
        Return a user's public profile together with the names of its roles.

        Raises:
            NotFoundError: no user exists for ``user_id``
        """
        user = await self.user_repository.find_by_id(db, user_id)
        if not user:
            raise NotFoundError("User not found")

        return await self._complete(db, user)

    async def get_self_profile(self, db: AsyncSession, current_user: UserModel) -> UserProfile:
        """Any authenticated caller may read their own profile."""
        return await self.get_profile_with_roles(db, current_user.id)

    async def get_user_profile(self, db: AsyncSession, current_user: UserModel, user_id: int) -> UserProfile:
        """
        Return another user's profile. The caller must hold the admin role.

        The admin check runs before the target is read, so a rejected caller
        learns nothing about whether ``user_id`` exists. A successful call
        issues three queries: admin assignment, target row, target role names.

        Raises:
            UnauthorizedError: the caller does not hold the admin role
            InvalidTargetError: no user exists for ``user_id``
        """
        if not await self.is_admin(db, current_user.id):
            logger.warning("User %s attempted to read user %s without the admin role", current_user.id, user_id)
            raise UnauthorizedError("Unauthorized")

        target = await self.user_repository.find_by_id(db, user_id)
        if not target:
            raise InvalidTargetError("Invalid user")

        return await self._complete(db, target)

    async def is_admin(self, db: AsyncSession, user_id: int) -> bool:
        assignment = await self.user_roles_repository.find_role_assignment_by_name(
            db, user_id, self.admin_role_name
        )
        return assignment is not None

    async def _complete(self, db: AsyncSession, user: UserModel) -> UserProfile:
        role_names = await self.user_roles_repository.list_role_names_by_user_id(db, user.id)
        return build_user_profile(user, role_names)


@lru_cache()
def get_user_service() -> UserService:
    return UserService(
        user_repository=get_user_repository(),
        user_roles_repository=get_user_roles_repository(),
    )
