"""Todo model."""

from sqlalchemy import Column, Integer, String, Text

from src.database import Base
from src.models.mixins import OBJECT_ID_LENGTH, CreatedTimeMixin, ObjectIdMixin


class Todo(Base, ObjectIdMixin, CreatedTimeMixin):
    """A single todo entry owned by one user.

    ``user_id`` is a plain reference to ``users.id``; removing a user's todos
    is the job of the account deletion service, not the database.
    """

    __tablename__ = "todos"

    content = Column(Text, nullable=False)
    user_id = Column(String(OBJECT_ID_LENGTH), nullable=False, index=True)
    version = Column(Integer, nullable=False, default=1)
