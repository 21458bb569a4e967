"""User model."""

from sqlalchemy import Column, Integer, String

from src.database import Base
from src.models.mixins import CreatedTimeMixin, ObjectIdMixin


class User(Base, ObjectIdMixin, CreatedTimeMixin):
    """User model for authentication and todo ownership."""

    __tablename__ = "users"

    email = Column(String(255), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)
    username = Column(String(255), nullable=False)
    version = Column(Integer, nullable=False, default=1)
