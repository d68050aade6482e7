"""
Seed the role table from ``app/db/data/roles.json``.

Role ids are left to the database so its identity sequence stays in step.

Usage:
    python -m app.db.seed
"""
import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.api.v1.models import Role
from app.api.v1.repositories import RoleRepository, get_role_repository
from app.db.session import db_manager
from app.utils.data_from_json import get_data_from_json

logger = logging.getLogger(__name__)


async def seed_roles(
        db: AsyncSession,
        filename: str = "roles.json",
        role_repository: RoleRepository | None = None,
) -> int:
    """Insert the roles listed in ``filename`` that are not yet present. Returns the number inserted."""
    role_repository = role_repository or get_role_repository()
    inserted = 0
    for item in get_data_from_json(filename):
        if await role_repository.get_by_name(db, item["name"]):
            continue
        db.add(Role(name=item["name"]))
        await db.flush()
        inserted += 1
    await db.commit()
    logger.info("Seeded %d role(s)", inserted)
    return inserted


async def main():
    await db_manager.create_tables()
    async with db_manager.async_session_factory() as session:
        await seed_roles(session)
    await db_manager.dispose()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    asyncio.run(main())
