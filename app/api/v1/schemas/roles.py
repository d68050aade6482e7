from app.core.schemas import BaseSchema


class RoleBase(BaseSchema):
    name: str


class Role(RoleBase):
    id: int
