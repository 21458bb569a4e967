"""Todo service for ownership-scoped CRUD."""

import logging

from sqlalchemy.orm import Session

from src.models.todo import Todo

logger = logging.getLogger(__name__)


class TodoService:
    """Service for todo operations on behalf of a single user."""

    def __init__(self, db: Session):
        self.db = db

    def list_for_user(self, user_id: str) -> list[Todo]:
        """Get every todo owned by the user, oldest first."""
        return (
            self.db.query(Todo)
            .filter(Todo.user_id == user_id)
            .order_by(Todo.id)
            .all()
        )

    def get_for_user(self, todo_id: str, user_id: str) -> Todo | None:
        """Get a todo if it exists and belongs to the user."""
        todo = self.db.query(Todo).filter(Todo.id == todo_id).first()
        if todo is None or todo.user_id != user_id:
            return None
        return todo

    def create(self, user_id: str, content: str) -> Todo:
        """Create a todo owned by the user."""
        todo = Todo(content=content, user_id=user_id)
        self.db.add(todo)
        self.db.commit()
        self.db.refresh(todo)
        logger.info(f"User {user_id} created todo {todo.id}")
        return todo

    def update_content(self, todo: Todo, content: str) -> Todo:
        """Replace a todo's content. Owner and timestamp are untouched."""
        todo.content = content
        self.db.commit()
        self.db.refresh(todo)
        return todo

    def delete(self, todo: Todo) -> None:
        """Delete a todo."""
        todo_id, user_id = todo.id, todo.user_id
        self.db.delete(todo)
        self.db.commit()
        logger.info(f"User {user_id} deleted todo {todo_id}")
