"""Authentication service for JWT and password handling."""

import logging
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.config import get_settings
from src.models.todo import Todo
from src.models.user import User

logger = logging.getLogger(__name__)

settings = get_settings()

# Password hashing context. bcrypt_sha256 covers the whole password, not only its first 72 bytes
pwd_context = CryptContext(schemes=["bcrypt_sha256"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def create_access_token(user_id: str) -> str:
    """Create a JWT access token for ``user_id``.

    The claims are built fresh on every call.
    """
    now = datetime.now(UTC)
    to_encode = {
        "iss": settings.jwt_issuer,
        "aud": settings.jwt_audience,
        "sub": user_id,
        "iat": now,
        "exp": now + timedelta(minutes=settings.jwt_expiration_minutes),
    }
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> dict | None:
    """Decode and validate a JWT token.

    Checks signature, expiry, issuer and audience, all of which must be
    present. Returns None when any of them fail.
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
            issuer=settings.jwt_issuer,
            options={
                "require_aud": True,
                "require_iss": True,
                "require_exp": True,
                "require_sub": True,
            },
        )
    except JWTError as e:
        logger.debug(f"Rejected access token: {e}")
        return None
    if not payload.get("sub"):
        return None
    return payload


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get a user by email."""
    return db.query(User).filter(User.email == email).first()


def get_user_by_id(db: Session, user_id: str) -> User | None:
    """Get a user by id."""
    return db.query(User).filter(User.id == user_id).first()


def authenticate_user(db: Session, email: str, password: str) -> User | None:
    """Authenticate a user by email and password."""
    user = get_user_by_email(db, email)
    if not user or not verify_password(password, user.password):
        logger.info("Failed login attempt")
        return None
    return user


def create_user(db: Session, email: str, password: str, username: str) -> User:
    """Create a new user."""
    user = User(email=email, password=get_password_hash(password), username=username)
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info(f"Registered user {user.id}")
    return user


def delete_account(db: Session, user_id: str) -> int:
    """Delete a user and every todo they own in one transaction.

    Returns the number of todos removed.
    """
    try:
        removed = (
            db.query(Todo).filter(Todo.user_id == user_id).delete(synchronize_session=False)
        )
        db.query(User).filter(User.id == user_id).delete(synchronize_session=False)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.error(f"Account deletion for {user_id} failed, rolled back")
        raise
    logger.info(f"Deleted account {user_id} and {removed} todo(s)")
    return removed
