from typing import Optional

from datamodel.models.category import Category
from datamodel.models.product import Product
from datamodel.models.user import User
from datamodel.schemas.product import ProductCreate, ProductUpdate
from datamodel.services.base import ModelService


class ProductService(ModelService):
    """
    Service class for Product operations.

    Category and owner are weak references: they are stored as IDs and
    resolved on demand. A dangling ID resolves to None.
    """

    model = Product
    create_schema = ProductCreate
    update_schema = ProductUpdate

    def get_category(self, product: Product) -> Optional[Category]:
        """Resolve the product's category reference."""
        return self.find_by_reference("Category", product.category_id)

    def get_owner(self, product: Product) -> Optional[User]:
        """Resolve the product's owner reference."""
        return self.find_by_reference("User", product.owner_id)
