"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from src.api.dependencies import get_current_user
from src.database import get_db
from src.models.user import User
from src.schemas.auth import (
    EMAIL_PATTERN,
    MessageResponse,
    Token,
    UserLogin,
    UserResponse,
    UserSignUp,
)
from src.services.auth import (
    authenticate_user,
    create_access_token,
    create_user,
    delete_account,
    get_user_by_email,
)

router = APIRouter(prefix="/api/auth", tags=["auth"])

TOKEN_COOKIE_NAME = "user"


@router.get("/public/search", response_model=MessageResponse)
def search_email(
    email: Annotated[str, Query(pattern=EMAIL_PATTERN)],
    db: Annotated[Session, Depends(get_db)],
):
    """Check whether an email address is still available."""
    if get_user_by_email(db, email):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="User with this email already exists",
        )
    return MessageResponse(message="OK")


@router.post("/public/login", response_model=Token)
def login(
    credentials: UserLogin,
    response: Response,
    db: Annotated[Session, Depends(get_db)],
):
    """Login with email and password."""
    user = authenticate_user(db, credentials.email, credentials.password)

    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    access_token = create_access_token(user.id)
    response.set_cookie(TOKEN_COOKIE_NAME, access_token)
    return Token(access_token=access_token)


@router.post(
    "/public/sign-up",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
)
def sign_up(
    user_data: UserSignUp,
    db: Annotated[Session, Depends(get_db)],
):
    """Register a new user."""
    # Duplicates are a 400 here, unlike the 409 from /public/search
    if get_user_by_email(db, user_data.email):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Bad request or user with this email already exists",
        )

    user = create_user(db, user_data.email, user_data.password, user_data.username)
    return UserResponse.model_validate(user)


@router.delete("/private/delete-account", response_model=MessageResponse)
def remove_account(
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Delete the caller's account together with all of their todos."""
    delete_account(db, current_user.id)
    return MessageResponse(message="Account deleted successfully")
