"""Tests for the authentication service."""

from datetime import UTC, datetime, timedelta
from unittest.mock import patch

import pytest
from jose import jwt
from sqlalchemy.exc import OperationalError

from src.config import get_settings
from src.models.todo import Todo
from src.models.user import User
from src.services.auth import (
    authenticate_user,
    create_access_token,
    create_user,
    decode_access_token,
    delete_account,
    get_password_hash,
    verify_password,
)

settings = get_settings()


class TestPasswordHashing:
    """Tests for password hashing helpers."""

    def test_hash_differs_from_plaintext(self):
        """The stored hash never equals the password."""
        hashed = get_password_hash("p1")
        assert hashed != "p1"
        assert verify_password("p1", hashed)
        assert not verify_password("p2", hashed)

    def test_hash_is_salted(self):
        """Hashing the same password twice gives different hashes."""
        assert get_password_hash("p1") != get_password_hash("p1")

    def test_whole_password_is_hashed(self):
        """Passwords that only differ after 72 bytes do not match."""
        hashed = get_password_hash("x" * 72 + "A")
        assert verify_password("x" * 72 + "A", hashed)
        assert not verify_password("x" * 72 + "B", hashed)


class TestAccessTokens:
    """Tests for token issuance and verification."""

    def test_round_trip_subject(self):
        """A freshly issued token decodes to its subject."""
        payload = decode_access_token(create_access_token("a" * 24))
        assert payload is not None
        assert payload["sub"] == "a" * 24

    def test_claims_are_not_shared(self):
        """Tokens for different users carry their own subject."""
        first = create_access_token("a" * 24)
        second = create_access_token("b" * 24)
        assert decode_access_token(first)["sub"] == "a" * 24
        assert decode_access_token(second)["sub"] == "b" * 24

    def test_wrong_secret_rejected(self):
        """A token signed with another secret is rejected."""
        now = datetime.now(UTC)
        token = jwt.encode(
            {
                "iss": settings.jwt_issuer,
                "aud": settings.jwt_audience,
                "sub": "a" * 24,
                "exp": now + timedelta(minutes=5),
            },
            "some-other-secret",
            algorithm=settings.jwt_algorithm,
        )
        assert decode_access_token(token) is None

    def test_wrong_issuer_rejected(self):
        """A token from another issuer is rejected."""
        now = datetime.now(UTC)
        token = jwt.encode(
            {
                "iss": "somebody",
                "aud": settings.jwt_audience,
                "sub": "a" * 24,
                "exp": now + timedelta(minutes=5),
            },
            settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
        )
        assert decode_access_token(token) is None

    def test_missing_subject_rejected(self):
        """A token without a subject is rejected."""
        now = datetime.now(UTC)
        token = jwt.encode(
            {
                "iss": settings.jwt_issuer,
                "aud": settings.jwt_audience,
                "exp": now + timedelta(minutes=5),
            },
            settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
        )
        assert decode_access_token(token) is None

    def test_missing_audience_rejected(self):
        """A token without an audience is rejected."""
        now = datetime.now(UTC)
        token = jwt.encode(
            {
                "iss": settings.jwt_issuer,
                "sub": "a" * 24,
                "exp": now + timedelta(minutes=5),
            },
            settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
        )
        assert decode_access_token(token) is None

    def test_missing_expiry_rejected(self):
        """A token that never expires is rejected."""
        token = jwt.encode(
            {
                "iss": settings.jwt_issuer,
                "aud": settings.jwt_audience,
                "sub": "a" * 24,
            },
            settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
        )
        assert decode_access_token(token) is None

    def test_token_without_audience_cannot_reach_todos(self, client, auth_headers):
        """The todo routes refuse a token that lacks an audience."""
        now = datetime.now(UTC)
        token = jwt.encode(
            {
                "iss": settings.jwt_issuer,
                "sub": auth_headers.user_id,
                "exp": now + timedelta(minutes=5),
            },
            settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
        )
        response = client.get(
            "/api/todos/private", headers={"Authorization": f"Bearer {token}"}
        )
        assert response.status_code == 401


class TestAccounts:
    """Tests for account lifecycle against the database."""

    def test_authenticate_user(self, db):
        """Correct credentials return the user, anything else None."""
        user = create_user(db, "svc@example.com", "secret", "svc")
        assert authenticate_user(db, "svc@example.com", "secret").id == user.id
        assert authenticate_user(db, "svc@example.com", "wrong") is None
        assert authenticate_user(db, "nobody@example.com", "secret") is None

    def test_delete_account_removes_owned_todos(self, db):
        """Deleting an account removes exactly that user's todos."""
        user = create_user(db, "gone@example.com", "secret", "gone")
        keeper = create_user(db, "kept@example.com", "secret", "kept")
        user_id, keeper_id = user.id, keeper.id
        db.add_all(
            [
                Todo(content="one", user_id=user_id),
                Todo(content="two", user_id=user_id),
                Todo(content="three", user_id=keeper_id),
            ]
        )
        db.commit()

        assert delete_account(db, user_id) == 2

        assert db.query(User).filter(User.id == user_id).count() == 0
        assert db.query(Todo).filter(Todo.user_id == user_id).count() == 0
        assert db.query(Todo).filter(Todo.user_id == keeper_id).count() == 1
        assert db.query(User).filter(User.id == keeper_id).count() == 1

    def test_delete_account_rolls_back_on_failure(self, db):
        """A failed commit leaves the user and their todos untouched."""
        user = create_user(db, "stay@example.com", "secret", "stay")
        user_id = user.id
        db.add(Todo(content="one", user_id=user_id))
        db.commit()

        error = OperationalError("DELETE FROM users", {}, Exception("database is locked"))
        with patch("sqlalchemy.orm.Session.commit", side_effect=error):
            with pytest.raises(OperationalError):
                delete_account(db, user_id)

        assert db.query(User).filter(User.id == user_id).count() == 1
        assert db.query(Todo).filter(Todo.user_id == user_id).count() == 1
