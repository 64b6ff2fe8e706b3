"""SQLAlchemy model for user preferences (one row per user)."""

from typing import Any, Optional
from uuid import UUID

from sqlalchemy import JSON, Boolean, ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from boardshop.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class UserPreferencesModel(Base, TimestampMixin):
    """Database model for user preferences."""

    __tablename__ = "user_preferences"

    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    )

    # Skate preferences
    preferred_deck_size: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    preferred_brands: Mapped[list[Any]] = mapped_column(JSON, nullable=False, default=list)
    skill_level: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="BEGINNER",
    )
    riding_style: Mapped[list[Any]] = mapped_column(JSON, nullable=False, default=list)

    # Notification preferences
    email_notifications: Mapped[bool] = mapped_column(Boolean, default=True)
    sms_notifications: Mapped[bool] = mapped_column(Boolean, default=False)
    push_notifications: Mapped[bool] = mapped_column(Boolean, default=True)
    marketing_emails: Mapped[bool] = mapped_column(Boolean, default=True)

    # Shopping preferences
    currency: Mapped[str] = mapped_column(String(3), default="USD")
    measurement_unit: Mapped[str] = mapped_column(String(20), default="IMPERIAL")

    def __repr__(self) -> str:
        return f"<UserPreferencesModel(user_id={self.user_id})>"
