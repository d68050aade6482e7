from typing import List

from sqlalchemy import Integer, String
from sqlalchemy.orm import relationship, mapped_column, Mapped

from app.core.models import Base, TimestampMixin


class Role(TimestampMixin, Base):
    """A named permission label such as "admin", "owner" or "member"."""
    __tablename__ = "roles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), unique=True, index=True, nullable=False)

    # Relationship to user assignments
    user_roles: Mapped[List["UserRole"]] = relationship(back_populates="role")

    def __repr__(self):
        return f"<Role(id='{self.id}', name='{self.name}')>"
