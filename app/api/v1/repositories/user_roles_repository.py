from functools import lru_cache
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.v1.models import Role as RoleModel, UserRole as UserRoleModel


class UserRolesRepository:
    """Read access to user/role assignments."""

    def __init__(self):
        self.model = UserRoleModel

    async def find_role_assignment(self, db: AsyncSession, user_id: int, role_id: int) -> Optional[UserRoleModel]:
        """
        Return the assignment of ``role_id`` to ``user_id`` or None if the user does not hold it.
        """
        result = await db.execute(
            select(self.model).where(
                self.model.user_id == user_id,
                self.model.role_id == role_id,
            )
        )
        return result.scalars().first()

    async def find_role_assignment_by_name(self, db: AsyncSession, user_id: int, role_name: str) -> Optional[UserRoleModel]:
        """
        Return the assignment of the role called ``role_name`` to ``user_id`` in a single query,
        or None if the user does not hold it or no such role exists.
        """
        result = await db.execute(
            select(self.model)
            .join(RoleModel, RoleModel.id == self.model.role_id)
            .where(
                self.model.user_id == user_id,
                RoleModel.name == role_name,
            )
        )
        return result.scalars().first()

    async def list_role_names_by_user_id(self, db: AsyncSession, user_id: int) -> List[str]:
        """
        Return the names of all roles assigned to ``user_id``.

        Equivalent to:
            SELECT r.name FROM roles r JOIN user_roles ur ON r.id = ur.role_id WHERE ur.user_id = :user_id
        """
        result = await db.execute(
            select(RoleModel.name)
            .join(self.model, RoleModel.id == self.model.role_id)
            .where(self.model.user_id == user_id)
        )
        return list(result.scalars().all())

    async def assign_role(self, db: AsyncSession, user_id: int, role_id: int) -> UserRoleModel:
        """
        Assign a role to a user, returning the existing assignment when already present.
        For administrative scripts and test setup; the HTTP API never mutates assignments.
        """
        assignment = await self.find_role_assignment(db, user_id, role_id)
        if assignment:
            return assignment
        assignment = self.model(user_id=user_id, role_id=role_id)
        db.add(assignment)
        await db.commit()
        return assignment


@lru_cache()
def get_user_roles_repository() -> UserRolesRepository:
    return UserRolesRepository()
