"""Pydantic schemas for API requests and responses."""

from src.schemas.auth import MessageResponse, Token, UserLogin, UserResponse, UserSignUp
from src.schemas.todo import TodoCreate, TodoResponse, TodoUpdate

__all__ = [
    "UserSignUp",
    "UserLogin",
    "Token",
    "UserResponse",
    "MessageResponse",
    "TodoCreate",
    "TodoUpdate",
    "TodoResponse",
]
