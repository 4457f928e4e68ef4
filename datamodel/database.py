from contextlib import contextmanager
from typing import Iterator, Optional
import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from datamodel.config import get_settings
from datamodel.registry import SchemaRegistry

logger = logging.getLogger(__name__)

# Base class for models
Base = declarative_base()


def default_registry() -> SchemaRegistry:
    """Build a registry holding every model of the package."""
    from datamodel.models import Category, Product, User

    registry = SchemaRegistry()
    for model in (Category, Product, User):
        registry.register(model)
    return registry


class Database:
    """
    Persistence wiring: engine, session factory and schema registry.

    Nothing here is process-global; create one Database per target
    database (tests create a fresh in-memory one per test).
    """

    def __init__(
        self,
        url: Optional[str] = None,
        echo: Optional[bool] = None,
        registry: Optional[SchemaRegistry] = None,
    ):
        settings = get_settings()
        self.url = url or settings.DATABASE_URL
        echo = settings.SQL_ECHO if echo is None else echo

        if make_url(self.url).get_backend_name() == "sqlite":
            engine_kwargs = {"connect_args": {"check_same_thread": False}}
            if make_url(self.url).database in (None, "", ":memory:"):
                # Single shared connection so the in-memory schema survives
                engine_kwargs["poolclass"] = StaticPool
        else:
            # Create SQLAlchemy engine with connection pooling
            engine_kwargs = {
                "pool_size": settings.DB_POOL_SIZE,
                "max_overflow": settings.DB_MAX_OVERFLOW,
                "pool_pre_ping": True,
            }

        # Bound values (passwords among them) stay out of error messages and logs
        self.engine = create_engine(self.url, echo=echo, hide_parameters=True, **engine_kwargs)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)
        self.registry = registry or default_registry()

    def create_all(self) -> None:
        """Create tables for every registered model."""
        logger.info("Creating database tables...")
        Base.metadata.create_all(bind=self.engine)
        logger.info("Database tables created successfully")

    def drop_all(self) -> None:
        Base.metadata.drop_all(bind=self.engine)

    def get_db(self) -> Iterator[Session]:
        """
        Yield a database session and close it after use.
        """
        db = self.SessionLocal()
        try:
            yield db
        finally:
            db.close()

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Context manager form of get_db."""
        yield from self.get_db()

    def dispose(self) -> None:
        self.engine.dispose()

    def __repr__(self):
        return f"<Database(url='{make_url(self.url).render_as_string(hide_password=True)}')>"
