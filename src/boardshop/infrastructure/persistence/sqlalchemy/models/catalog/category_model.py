"""SQLAlchemy model for categories."""

from typing import Optional
from uuid import UUID

from sqlalchemy import String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from boardshop.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class CategoryModel(Base, TimestampMixin):
    """Database model for product categories."""

    __tablename__ = "categories"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<CategoryModel(id={self.id}, name={self.name})>"
