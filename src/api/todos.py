"""Todo API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from src.api.dependencies import get_current_user, get_todo_service
from src.models.mixins import is_valid_object_id
from src.models.todo import Todo
from src.models.user import User
from src.schemas.auth import MessageResponse
from src.schemas.todo import TodoCreate, TodoResponse, TodoUpdate
from src.services.todo_service import TodoService

router = APIRouter(prefix="/api/todos", tags=["todos"])


def get_user_todo(
    todo_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[TodoService, Depends(get_todo_service)],
) -> Todo:
    """Resolve the todo in the path, owned by the current user."""
    if not is_valid_object_id(todo_id):
        raise HTTPException(
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            detail="Unsupported Media Type",
        )

    # Other users' todos look exactly like missing ones
    todo = service.get_for_user(todo_id, current_user.id)
    if todo is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
    return todo


@router.get("/private", response_model=list[TodoResponse])
def get_todos(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[TodoService, Depends(get_todo_service)],
):
    """Get all todos of the current user. Having none is a 404."""
    todos = service.list_for_user(current_user.id)
    if not todos:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
    return [TodoResponse.model_validate(todo) for todo in todos]


@router.post("/private", response_model=TodoResponse, status_code=status.HTTP_201_CREATED)
def create_todo(
    todo_data: TodoCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[TodoService, Depends(get_todo_service)],
):
    """Create a todo for the current user."""
    todo = service.create(current_user.id, todo_data.content)
    return TodoResponse.model_validate(todo)


@router.patch("/private/todos/{todo_id}", response_model=MessageResponse)
def update_todo(
    todo_data: TodoUpdate,
    todo: Annotated[Todo, Depends(get_user_todo)],
    service: Annotated[TodoService, Depends(get_todo_service)],
):
    """Replace the content of a todo."""
    service.update_content(todo, todo_data.content)
    return MessageResponse(message="OK")


@router.delete("/private/todos/{todo_id}", response_model=MessageResponse)
def delete_todo(
    todo: Annotated[Todo, Depends(get_user_todo)],
    service: Annotated[TodoService, Depends(get_todo_service)],
):
    """Delete a todo."""
    service.delete(todo)
    return MessageResponse(message="OK")
