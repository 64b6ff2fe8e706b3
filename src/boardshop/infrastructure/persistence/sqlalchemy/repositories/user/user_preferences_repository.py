"""SQLAlchemy implementation of UserPreferencesRepository."""

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from boardshop.domain.shared.time import utc_now
from boardshop.domain.user import UserPreferences, UserPreferencesRepository
from boardshop.infrastructure.persistence.sqlalchemy.models.user import (
    UserPreferencesModel,
)

logger = logging.getLogger(__name__)


class UserPreferencesRepositorySQLAlchemy(UserPreferencesRepository):
    """SQLAlchemy implementation of the UserPreferencesRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_user_id(self, user_id: UUID) -> Optional[UserPreferences]:
        model = await self._find_model(user_id)
        if model is None:
            return None
        return UserPreferences(
            preferred_deck_size=model.preferred_deck_size,
            preferred_brands=tuple(model.preferred_brands or ()),
            skill_level=model.skill_level,
            riding_style=tuple(model.riding_style or ()),
            email_notifications=model.email_notifications,
            sms_notifications=model.sms_notifications,
            push_notifications=model.push_notifications,
            marketing_emails=model.marketing_emails,
            currency=model.currency,
            measurement_unit=model.measurement_unit,
        )

    async def save(self, user_id: UUID, preferences: UserPreferences) -> None:
        model = await self._find_model(user_id)
        if model is None:
            model = UserPreferencesModel(user_id=user_id)
            self._session.add(model)
            logger.debug("Creating preferences for user: %s", user_id)

        model.preferred_deck_size = preferences.preferred_deck_size
        model.preferred_brands = list(preferences.preferred_brands)
        model.skill_level = preferences.skill_level.value
        model.riding_style = list(preferences.riding_style)
        model.email_notifications = preferences.email_notifications
        model.sms_notifications = preferences.sms_notifications
        model.push_notifications = preferences.push_notifications
        model.marketing_emails = preferences.marketing_emails
        model.currency = preferences.currency
        model.measurement_unit = preferences.measurement_unit
        model.updated_at = utc_now()

        await self._session.flush()

    async def _find_model(self, user_id: UUID) -> Optional[UserPreferencesModel]:
        stmt = select(UserPreferencesModel).where(
            UserPreferencesModel.user_id == user_id,
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()
