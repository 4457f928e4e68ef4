import pytest

from datamodel.database import Database
from datamodel.services import CategoryService, ProductService, UserService


# Create test database (SQLite in-memory for testing)
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"


@pytest.fixture(scope="function")
def database():
    """Fresh in-memory database with tables created for each test."""
    db = Database(SQLALCHEMY_DATABASE_URL)
    db.create_all()

    yield db

    db.drop_all()
    db.dispose()


@pytest.fixture(scope="function")
def db_session(database):
    """Create database session for direct database access in tests."""
    with database.session() as session:
        yield session


@pytest.fixture
def products(database, db_session):
    return ProductService(db_session, database.registry)


@pytest.fixture
def users(database, db_session):
    return UserService(db_session, database.registry)


@pytest.fixture
def categories(database, db_session):
    return CategoryService(db_session, database.registry)
