from boardshop.infrastructure.persistence.sqlalchemy.models.user.address_model import (
    AddressModel,
)
from boardshop.infrastructure.persistence.sqlalchemy.models.user.user_model import (
    UserModel,
)
from boardshop.infrastructure.persistence.sqlalchemy.models.user.user_preferences_model import (  # NOQA: E501
    UserPreferencesModel,
)

__all__ = ["AddressModel", "UserModel", "UserPreferencesModel"]
