from pydantic import BaseModel, Field, ConfigDict, field_validator
from datetime import datetime
from typing import Optional

from datamodel.ids import UserId


class UserCreate(BaseModel):
    """Schema for registering a new user. Username and email are lowercased."""
    username: str = Field(..., min_length=1, max_length=150, description="Unique username")
    email: str = Field(..., min_length=1, max_length=255, description="Unique email address")
    password: str = Field(..., min_length=1, max_length=255, description="Password, stored as supplied")

    @field_validator("username", "email")
    @classmethod
    def lowercase(cls, value: str) -> str:
        return value.lower()


class UserUpdate(BaseModel):
    """Schema for updating a user. All fields are optional."""
    username: Optional[str] = Field(None, min_length=1, max_length=150)
    email: Optional[str] = Field(None, min_length=1, max_length=255)
    password: Optional[str] = Field(None, min_length=1, max_length=255)

    @field_validator("username", "email")
    @classmethod
    def lowercase(cls, value: Optional[str]) -> Optional[str]:
        return value.lower() if value is not None else value


class UserResponse(BaseModel):
    """Schema for user response. The password is never included."""
    id: UserId
    username: str
    email: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
