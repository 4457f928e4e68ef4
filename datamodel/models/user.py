from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import validates
from sqlalchemy.sql import func

from datamodel.database import Base


class User(Base):
    """
    User model for the todo application.

    Attributes:
        id: Unique identifier for the user
        username: Unique login name, stored lowercase
        email: Unique email address, stored lowercase
        password: Password as supplied (no hashing)
        created_at: Timestamp when user was created
        updated_at: Timestamp when user was last updated
    """
    __tablename__ = "users"

    REQUIRED_FIELDS = ("username", "email", "password")
    UNIQUE_FIELDS = ("username", "email")
    NON_NULL_FIELDS = REQUIRED_FIELDS

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(150), nullable=False, unique=True, index=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    @validates("username", "email")
    def _lowercase(self, key, value):
        return value.lower() if isinstance(value, str) else value

    def __repr__(self):
        return f"<User(id={self.id}, username='{self.username}')>"
