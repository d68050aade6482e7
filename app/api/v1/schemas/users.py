"""
Pydantic schemas for the public representation of a User.

The profile schema is an allowlist: only the fields declared on
``UserProfile`` ever leave the service. Internal columns (``id``,
``tokens``, ``updated_at``) are not declared and therefore never serialized.
"""

from datetime import datetime
from typing import Iterable, List
from uuid import UUID

from pydantic import ConfigDict, EmailStr

from app.core.schemas import BaseSchema

PROFILE_FIELDS = ("uuid", "email", "created_at")


class UserBase(BaseSchema):
    email: EmailStr


class UserProfile(UserBase):
    """A user's public attributes merged with the names of their roles."""
    model_config = ConfigDict(from_attributes=True, extra="ignore")

    uuid: UUID
    created_at: datetime
    roles: List[str]


def build_user_profile(user, role_names: Iterable[str]) -> UserProfile:
    """
    Merge a user row with its role names into a ``UserProfile``.

    Only the allowlisted fields in ``PROFILE_FIELDS`` are read from ``user``.
    Role names are de-duplicated while keeping their first-seen order.

    Args:
        user: ORM ``User`` (or any object exposing the allowlisted attributes)
        role_names: role names assigned to the user

    Returns:
        UserProfile ready to be returned to a caller
    """
    fields = {name: getattr(user, name) for name in PROFILE_FIELDS}
    fields["roles"] = list(dict.fromkeys(role_names))
    return UserProfile.model_validate(fields)
