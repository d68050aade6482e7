from collections.abc import AsyncGenerator
from dataclasses import dataclass

import pytest
import pytest_asyncio
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from httpx import ASGITransport, AsyncClient
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.main import app
from app.api.v1.models import Role, User
from app.api.v1.repositories import UserRolesRepository
from app.core.config import settings
from app.core.models import Base
from app.core.security import create_access_token
from app.db import get_session


def _generate_key_pair() -> tuple[str, str]:
    key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    private_pem = key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode()
    public_pem = key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    ).decode()
    return private_pem, public_pem


@pytest.fixture(scope="session", autouse=True)
def rsa_keys():
    private_pem, public_pem = _generate_key_pair()
    previous = settings.RSA_PRIVATE_KEY, settings.RSA_PUBLIC_KEY
    settings.RSA_PRIVATE_KEY, settings.RSA_PUBLIC_KEY = private_pem, public_pem
    yield private_pem, public_pem
    settings.RSA_PRIVATE_KEY, settings.RSA_PUBLIC_KEY = previous


@pytest_asyncio.fixture
async def session_factory(tmp_path) -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'users.db'}", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


async def create_user(db: AsyncSession, email: str, role_names: tuple[str, ...] = ()) -> User:
    user_roles_repository = UserRolesRepository()
    user = User(email=email, tokens=["stored-refresh-token"])
    db.add(user)
    await db.flush()
    for name in role_names:
        role = (await db.execute(select(Role).where(Role.name == name))).scalar_one()
        await user_roles_repository.assign_role(db, user.id, role.id)
    await db.commit()
    await db.refresh(user)
    return user


@dataclass
class Scope:
    admin_user: User
    general_user: User
    user: User

    @property
    def admin_access_token(self) -> str:
        return create_access_token(self.admin_user)

    @property
    def general_access_token(self) -> str:
        return create_access_token(self.general_user)

    @property
    def access_token(self) -> str:
        return create_access_token(self.user)


@pytest_asyncio.fixture
async def scope(db_session: AsyncSession) -> Scope:
    db_session.add_all([
        Role(id=1, name="admin"),
        Role(id=2, name="owner"),
        Role(id=3, name="member"),
    ])
    await db_session.commit()

    return Scope(
        admin_user=await create_user(db_session, "admin@example.com", ("admin",)),
        general_user=await create_user(db_session, "general@example.com"),
        user=await create_user(db_session, "user@example.com", ("owner", "member")),
    )


@pytest_asyncio.fixture
async def async_client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    async def _get_test_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_session] = _get_test_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
