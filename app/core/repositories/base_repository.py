from typing import Generic, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.models import Base


T = TypeVar("T", bound=Base)


class BaseRepository(Generic[T]):
    def __init__(self, model: Type[T]):
        self.model = model

    async def _get_by_id_orm(self, db: AsyncSession, item_id) -> Optional[T]:
        result = await db.execute(select(self.model).filter(self.model.id == item_id))
        return result.scalars().first()
