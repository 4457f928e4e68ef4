from pydantic import BaseModel, Field, ConfigDict
from datetime import datetime
from typing import Optional

from datamodel.ids import CategoryId


class CategoryCreate(BaseModel):
    """Schema for creating a category."""
    name: str = Field(..., min_length=1, max_length=255, description="Category name")


class CategoryUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)


class CategoryResponse(BaseModel):
    id: CategoryId
    name: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
