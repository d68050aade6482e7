from uuid import UUID, uuid4
from typing import List, Optional

from pydantic import EmailStr, TypeAdapter, ValidationError
from sqlalchemy import Integer, JSON, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from app.core.models import Base, TimestampMixin, EmailValidationError

EMAIL_MIN_LENGTH = 6
EMAIL_MAX_LENGTH = 254

_email_adapter = TypeAdapter(EmailStr)


class User(TimestampMixin, Base):
    """Core application user model."""
    __tablename__ = "users"

    # Internal identifier, never returned to callers
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    uuid: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), unique=True, nullable=False, default=uuid4
    )
    email: Mapped[str] = mapped_column(String(EMAIL_MAX_LENGTH), nullable=False)
    tokens: Mapped[Optional[list]] = mapped_column(JSON, nullable=True)

    user_roles: Mapped[List["UserRole"]] = relationship(back_populates="user", cascade="all, delete-orphan")

    @validates("email")
    def validate_email(self, key, email: str) -> str:
        if email is None or len(email) < EMAIL_MIN_LENGTH or len(email) > EMAIL_MAX_LENGTH:
            raise EmailValidationError(
                f"Email must be between {EMAIL_MIN_LENGTH}-{EMAIL_MAX_LENGTH} characters"
            )
        try:
            _email_adapter.validate_python(email)
        except ValidationError:
            raise EmailValidationError("Email format is invalid")
        return email

    def __repr__(self):
        return f"<User(id='{self.id}', email='{self.email}')>"
