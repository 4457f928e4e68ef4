from datamodel.services.category_service import CategoryService
from datamodel.services.exceptions import (
    DataModelError,
    MissingRequiredField,
    TypeMismatch,
    UniquenessViolation,
)
from datamodel.services.product_service import ProductService
from datamodel.services.user_service import UserService

__all__ = [
    "CategoryService",
    "DataModelError",
    "MissingRequiredField",
    "ProductService",
    "TypeMismatch",
    "UniquenessViolation",
    "UserService",
]
