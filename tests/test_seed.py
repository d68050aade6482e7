import pytest
from sqlalchemy import select

from app.api.v1.models import Role
from app.db.seed import seed_roles


@pytest.mark.asyncio
async def test_seed_roles_is_idempotent(db_session) -> None:
    assert await seed_roles(db_session) == 3
    assert await seed_roles(db_session) == 0

    names = (await db_session.execute(select(Role.name).order_by(Role.id))).scalars().all()
    assert names == ["admin", "owner", "member"]


@pytest.mark.asyncio
async def test_seeded_roles_leave_id_assignment_to_database(db_session) -> None:
    await seed_roles(db_session)
    db_session.add(Role(name="auditor"))
    await db_session.commit()

    ids = (await db_session.execute(select(Role.id).order_by(Role.id))).scalars().all()
    assert ids == [1, 2, 3, 4]
