from datetime import timedelta

import pytest
from fastapi import HTTPException
from pydantic import ValidationError

from parnaioca.core.security import (
    create_access_token,
    create_session_token,
    decode_session_token,
    get_password_hash,
    verify_password,
)
from parnaioca.models.user import User, UserRole


def test_password_hash_verifies_only_the_original_password():
    hashed = get_password_hash("admin123")

    assert hashed != "admin123"
    assert verify_password("admin123", hashed)
    assert not verify_password("admin124", hashed)


def test_malformed_hash_does_not_verify():
    assert not verify_password("admin123", "not-a-bcrypt-hash")


def test_session_token_carries_role_claim():
    user = User(id="u-1", email="admin@parnaioca.com", role=UserRole.ADMIN)

    session = decode_session_token(create_session_token(user))

    assert session.user_id == "u-1"
    assert session.email == "admin@parnaioca.com"
    assert session.role == UserRole.ADMIN
    assert session.is_admin


def test_staff_session_is_not_admin():
    user = User(id="u-2", email="funcionario@parnaioca.com", role=UserRole.STAFF)
    assert not decode_session_token(create_session_token(user)).is_admin


def test_session_context_is_immutable():
    user = User(id="u-1", email="admin@parnaioca.com", role=UserRole.STAFF)
    session = decode_session_token(create_session_token(user))

    with pytest.raises(ValidationError):
        session.role = UserRole.ADMIN


@pytest.mark.parametrize(
    "token",
    [
        "garbage",
        create_access_token({"sub": "u-1", "email": "x@y.com"}),
        create_access_token({"sub": "u-1", "email": "x@y.com", "role": "owner"}),
        create_access_token(
            {"sub": "u-1", "email": "x@y.com", "role": "admin"},
            expires_delta=timedelta(minutes=-5),
        ),
    ],
    ids=["garbage", "missing-role", "unknown-role", "expired"],
)
def test_invalid_tokens_are_rejected(token):
    with pytest.raises(HTTPException) as exc_info:
        decode_session_token(token)
    assert exc_info.value.status_code == 401
