from sqlalchemy import ForeignKey, Integer
from sqlalchemy.orm import relationship, mapped_column, Mapped

from app.core.models import Base


class UserRole(Base):
    """
    Association table linking a User to a Role.
    The composite primary key keeps each (user, role) pair unique.
    """
    __tablename__ = "user_roles"

    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True
    )
    role_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("roles.id", ondelete="CASCADE"), primary_key=True
    )

    user: Mapped["User"] = relationship(back_populates="user_roles")
    role: Mapped["Role"] = relationship(back_populates="user_roles")

    def __repr__(self):
        return f"<UserRole(User ID='{self.user_id}', Role ID='{self.role_id}')>"
