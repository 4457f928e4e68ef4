from datamodel.schemas.category import CategoryCreate, CategoryResponse, CategoryUpdate
from datamodel.schemas.product import ProductCreate, ProductResponse, ProductUpdate
from datamodel.schemas.user import UserCreate, UserResponse, UserUpdate

__all__ = [
    "CategoryCreate",
    "CategoryResponse",
    "CategoryUpdate",
    "ProductCreate",
    "ProductResponse",
    "ProductUpdate",
    "UserCreate",
    "UserResponse",
    "UserUpdate",
]
