"""Authentication schemas."""

from pydantic import BaseModel, ConfigDict, Field

# Shared by sign-up and the availability check so both accept the same addresses
EMAIL_PATTERN = r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"


class UserSignUp(BaseModel):
    """User registration request."""

    email: str = Field(..., pattern=EMAIL_PATTERN, max_length=255)
    password: str = Field(..., min_length=1, max_length=128)
    username: str = Field(..., min_length=1, max_length=255)


class UserLogin(BaseModel):
    """User login request."""

    email: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1, max_length=128)


class Token(BaseModel):
    """JWT token response."""

    model_config = ConfigDict(populate_by_name=True)

    access_token: str = Field(..., alias="accessToken")


class UserResponse(BaseModel):
    """Stored user record as returned by sign-up."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str = Field(..., alias="_id")
    email: str
    password: str
    username: str
    created_time: str = Field(..., alias="createdTime")
    version: int = Field(..., alias="__v")


class MessageResponse(BaseModel):
    """Generic acknowledgement."""

    message: str
