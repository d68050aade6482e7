from functools import lru_cache
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.v1.models import Role as RoleModel
from app.api.v1.schemas import Role
from app.core.repositories import BaseRepository


class RoleRepository(BaseRepository[RoleModel]):
    """
    Repository for Role entity, returning validated Pydantic models.
    """
    def __init__(self):
        super().__init__(RoleModel)

    async def get_by_name(self, db: AsyncSession, name: str) -> Optional[Role]:
        """
        Retrieve a single role by its unique name.
        """
        result = await db.execute(select(self.model).where(self.model.name == name))
        orm_role = result.scalars().first()
        if not orm_role:
            return None
        return Role.model_validate(orm_role)


@lru_cache()
def get_role_repository() -> RoleRepository:
    """Dependency injector for RoleRepository."""
    return RoleRepository()
