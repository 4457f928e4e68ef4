from pydantic import BaseModel, Field, ConfigDict, field_validator
from datetime import datetime
from typing import Optional

from datamodel.ids import CategoryId, ProductId, UserId


def _reject_bool(value):
    # Lax mode would read True as 1
    if isinstance(value, bool):
        raise ValueError("must be a number, not a boolean")
    return value


class ProductBase(BaseModel):
    """
    Base schema for Product with common attributes.

    Accepts both the Python field names and the document-style keys
    (productImage, category, owner).
    """
    name: str = Field(..., min_length=1, max_length=255, description="Product name")
    price: float = Field(..., description="Product price")
    description: str = Field(..., min_length=1, description="Product description")
    product_image: Optional[str] = Field(None, alias="productImage", max_length=1024, description="Image location")
    stock: int = Field(default=0, description="Available stock")
    category_id: Optional[CategoryId] = Field(None, alias="category", description="Referenced category ID")
    owner_id: Optional[UserId] = Field(None, alias="owner", description="Referenced owner (user) ID")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("price", "stock", mode="before")
    @classmethod
    def numbers_only(cls, value):
        return _reject_bool(value)


class ProductCreate(ProductBase):
    """Schema for creating a new product."""
    pass


class ProductUpdate(BaseModel):
    """Schema for updating an existing product. All fields are optional."""
    name: Optional[str] = Field(None, min_length=1, max_length=255, description="Product name")
    price: Optional[float] = Field(None, description="Product price")
    description: Optional[str] = Field(None, min_length=1, description="Product description")
    product_image: Optional[str] = Field(None, alias="productImage", max_length=1024)
    stock: Optional[int] = Field(None, description="Available stock")
    category_id: Optional[CategoryId] = Field(None, alias="category")
    owner_id: Optional[UserId] = Field(None, alias="owner")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("price", "stock", mode="before")
    @classmethod
    def numbers_only(cls, value):
        return _reject_bool(value)


class ProductResponse(BaseModel):
    """Schema for product response including all fields."""
    id: ProductId
    name: str
    price: float
    description: str
    product_image: Optional[str] = None
    stock: int
    category_id: Optional[CategoryId] = None
    owner_id: Optional[UserId] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
