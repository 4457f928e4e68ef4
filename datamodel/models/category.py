from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func

from datamodel.database import Base


class Category(Base):
    """Product category; the target of Product.category_id."""
    __tablename__ = "categories"

    REQUIRED_FIELDS = ("name",)
    UNIQUE_FIELDS = ("name",)
    NON_NULL_FIELDS = REQUIRED_FIELDS

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False, unique=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<Category(id={self.id}, name='{self.name}')>"
