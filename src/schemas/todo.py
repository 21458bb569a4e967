"""Todo schemas."""

from pydantic import BaseModel, ConfigDict, Field


class TodoCreate(BaseModel):
    """Create a new todo. Only the content comes from the client."""

    content: str = Field(..., min_length=1)


class TodoUpdate(BaseModel):
    """Replace the content of a todo."""

    content: str = Field(..., min_length=1)


class TodoResponse(BaseModel):
    """Todo response."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str = Field(..., alias="_id")
    content: str
    created_time: str = Field(..., alias="createdTime")
    user_id: str = Field(..., alias="userId")
    version: int = Field(..., alias="__v")
