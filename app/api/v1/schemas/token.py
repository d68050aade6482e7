from typing import Optional
from uuid import UUID

from pydantic import Field

from app.core.schemas import BaseSchema


class TokenData(BaseSchema):
    """Decoded access token claims."""
    user_id: int = Field(alias="userId")
    user_uuid: Optional[UUID] = Field(default=None, alias="userUuid")
    iss: str
    exp: int
