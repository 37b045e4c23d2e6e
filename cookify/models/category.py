import uuid

from sqlalchemy import Column, DateTime, String, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from cookify.database import Base
from cookify.models.localized_column import LocalizedTextType


class Category(Base):
    """Recipe category with a bilingual name (e.g., Appetizers / Món khai vị)."""

    __tablename__ = "categories"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(
        LocalizedTextType(), nullable=False, unique=True
    )  # JSON-encoded LocalizedText; canonical encoding makes equal names collide
    image_file_name = Column(String(255))
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Deleting a category with recipes is refused by CategoryService
    recipes = relationship("Recipe", back_populates="category", passive_deletes="all")
