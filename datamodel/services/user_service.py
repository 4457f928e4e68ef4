from datamodel.models.user import User
from datamodel.schemas.user import UserCreate, UserUpdate
from datamodel.services.base import ModelService


class UserService(ModelService):
    """
    Service class for User operations.

    Username and email are lowercased before they reach the database,
    so the uniqueness checks are case-insensitive. The password is
    stored exactly as supplied.
    """

    model = User
    create_schema = UserCreate
    update_schema = UserUpdate
