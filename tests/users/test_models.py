from datetime import datetime, timezone
from types import SimpleNamespace
from uuid import uuid4

import pytest

from app.api.v1.models import User
from app.api.v1.schemas import build_user_profile
from app.core.models import EmailValidationError


def test_valid_email_is_accepted() -> None:
    assert User(email="user@example.com").email == "user@example.com"


@pytest.mark.parametrize("email", ["a@b.c", "x" * 250 + "@example.com"])
def test_email_length_is_enforced(email) -> None:
    with pytest.raises(EmailValidationError, match="between 6-254"):
        User(email=email)


@pytest.mark.parametrize("email", ["not-an-email", "missing-at.example.com", "user@@example.com"])
def test_email_format_is_enforced(email) -> None:
    with pytest.raises(EmailValidationError, match="format is invalid"):
        User(email=email)


def test_profile_keeps_only_public_fields() -> None:
    row = SimpleNamespace(
        id=7,
        uuid=uuid4(),
        email="user@example.com",
        tokens=["secret"],
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
        updated_at=datetime(2024, 2, 1, tzinfo=timezone.utc),
    )
    profile = build_user_profile(row, ["owner", "member"])

    assert profile.model_dump() == {
        "uuid": row.uuid,
        "email": "user@example.com",
        "created_at": row.created_at,
        "roles": ["owner", "member"],
    }


def test_profile_drops_duplicate_roles() -> None:
    row = SimpleNamespace(uuid=uuid4(), email="user@example.com", created_at=datetime.now(timezone.utc))
    profile = build_user_profile(row, ["owner", "member", "owner"])
    assert profile.roles == ["owner", "member"]


def test_shortest_accepted_email() -> None:
    assert User(email="a@b.co").email == "a@b.co"


def test_longest_accepted_email() -> None:
    email = "a" * 64 + "@" + "b" * 63 + "." + "c" * 63 + "." + "d" * 57 + ".com"
    assert len(email) == 254
    assert User(email=email).email == email
