from functools import lru_cache
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.repositories import BaseRepository
from app.api.v1.models import User as UserModel


class UserRepository(BaseRepository[UserModel]):
    def __init__(self):
        super().__init__(UserModel)

    async def find_by_id(self, db: AsyncSession, user_id: int) -> Optional[UserModel]:
        """
        Retrieve a User row by its internal identifier.

        Args:
            db: Database session
            user_id: User's internal identifier

        Returns:
            UserModel ORM instance or None if not found
        """
        return await self._get_by_id_orm(db, user_id)


@lru_cache()
def get_user_repository() -> UserRepository:
    return UserRepository()
