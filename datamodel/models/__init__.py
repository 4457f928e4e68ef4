from datamodel.models.category import Category
from datamodel.models.product import Product
from datamodel.models.user import User

__all__ = ["Category", "Product", "User"]
