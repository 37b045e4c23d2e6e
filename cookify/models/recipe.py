import uuid

from sqlalchemy import Column, DateTime, ForeignKey, Index, String, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from cookify.database import Base
from cookify.models.localized_column import (
    LocalizedTextType,
    localized_list_column_type,
)


class Recipe(Base):
    """Bilingual recipe. Localized fields are stored as JSON text columns."""

    __tablename__ = "recipes"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(LocalizedTextType(), nullable=False)
    description = Column(LocalizedTextType(), nullable=False)
    prep_time = Column(String(50), nullable=False, default="")  # e.g., "10 minutes"
    cook_time = Column(String(50), nullable=False, default="")
    image_file_name = Column(String(255))
    category_id = Column(
        Uuid, ForeignKey("categories.id", ondelete="RESTRICT"), nullable=False
    )

    # Ordered lists; element order is the display/numbering order
    ingredients = Column(localized_list_column_type(), nullable=False, default=list)
    instructions = Column(localized_list_column_type(), nullable=False, default=list)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    category = relationship("Category", back_populates="recipes")

    __table_args__ = (Index("idx_recipes_category_id", "category_id"),)
