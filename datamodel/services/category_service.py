from datamodel.models.category import Category
from datamodel.schemas.category import CategoryCreate, CategoryUpdate
from datamodel.services.base import ModelService


class CategoryService(ModelService):
    """Service class for Category operations."""

    model = Category
    create_schema = CategoryCreate
    update_schema = CategoryUpdate
