"""User, profile, address and preference schemas."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field, field_validator

from boardshop.domain.user import (
    Address,
    AddressType,
    SkillLevel,
    UserPreferences,
    UserRole,
)
from boardshop.presentation.api.schemas.auth import UserResponse

UPLOADS_URL_PREFIX = "/uploads/"


def _reject_stored_upload(value: str | None) -> str | None:
    """Stored upload URLs may only be assigned by the avatar upload endpoint."""
    if value is not None and value.lstrip().startswith(UPLOADS_URL_PREFIX):
        msg = "Uploaded files can only be set through the avatar upload endpoint"
        raise ValueError(msg)
    return value


class CreateUserRequest(BaseModel):
    """Administrator request to create an account with any role."""

    email: EmailStr
    password: str = Field(..., min_length=8, max_length=128)
    role: UserRole = Field(default=UserRole.USER)
    is_active: bool = True
    first_name: str | None = Field(None, max_length=100)
    last_name: str | None = Field(None, max_length=100)
    phone: str | None = Field(None, max_length=20)
    date_of_birth: date | None = None


class UpdateUserRequest(BaseModel):
    """Administrator partial update; omitted fields are left unchanged."""

    email: EmailStr | None = None
    password: str | None = Field(None, min_length=8, max_length=128)
    role: UserRole | None = None
    is_active: bool | None = None
    first_name: str | None = Field(None, max_length=100)
    last_name: str | None = Field(None, max_length=100)
    phone: str | None = Field(None, max_length=20)
    date_of_birth: date | None = None
    avatar: str | None = Field(None, max_length=500)

    @field_validator("avatar")
    @classmethod
    def avatar_not_stored_upload(cls, value: str | None) -> str | None:
        return _reject_stored_upload(value)


class UpdateProfileRequest(BaseModel):
    """Self-service profile update; role and activation are not editable."""

    first_name: str | None = Field(None, max_length=100)
    last_name: str | None = Field(None, max_length=100)
    phone: str | None = Field(None, max_length=20)
    date_of_birth: date | None = None
    avatar: str | None = Field(None, max_length=500)
    password: str | None = Field(None, min_length=8, max_length=128)

    @field_validator("avatar")
    @classmethod
    def avatar_not_stored_upload(cls, value: str | None) -> str | None:
        return _reject_stored_upload(value)


class AddressCreateRequest(BaseModel):
    type: AddressType = AddressType.SHIPPING
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    company: str | None = Field(None, max_length=100)
    address_line1: str = Field(..., min_length=1, max_length=255)
    address_line2: str | None = Field(None, max_length=255)
    city: str = Field(..., min_length=1, max_length=100)
    state: str = Field(..., min_length=1, max_length=100)
    postal_code: str = Field(..., min_length=1, max_length=20)
    country: str = Field(default="US", max_length=100)
    phone: str | None = Field(None, max_length=20)
    is_default: bool = False


class AddressUpdateRequest(BaseModel):
    type: AddressType | None = None
    first_name: str | None = Field(None, min_length=1, max_length=100)
    last_name: str | None = Field(None, min_length=1, max_length=100)
    company: str | None = Field(None, max_length=100)
    address_line1: str | None = Field(None, min_length=1, max_length=255)
    address_line2: str | None = Field(None, max_length=255)
    city: str | None = Field(None, min_length=1, max_length=100)
    state: str | None = Field(None, min_length=1, max_length=100)
    postal_code: str | None = Field(None, min_length=1, max_length=20)
    country: str | None = Field(None, max_length=100)
    phone: str | None = Field(None, max_length=20)
    is_default: bool | None = None


class AddressResponse(BaseModel):
    id: UUID
    user_id: UUID
    type: AddressType
    first_name: str
    last_name: str
    company: str | None
    address_line1: str
    address_line2: str | None
    city: str
    state: str
    postal_code: str
    country: str
    phone: str | None
    is_default: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, address: Address) -> "AddressResponse":
        return cls(
            id=address.id,
            user_id=address.user_id,
            type=address.type,
            first_name=address.first_name,
            last_name=address.last_name,
            company=address.company,
            address_line1=address.address_line1,
            address_line2=address.address_line2,
            city=address.city,
            state=address.state,
            postal_code=address.postal_code,
            country=address.country,
            phone=address.phone,
            is_default=address.is_default,
            created_at=address.created_at,
            updated_at=address.updated_at,
        )


class PreferencesRequest(BaseModel):
    """Preference changes; omitted fields keep their current value."""

    preferred_deck_size: str | None = Field(None, max_length=20)
    preferred_brands: list[str] | None = None
    skill_level: SkillLevel | None = None
    riding_style: list[str] | None = None
    email_notifications: bool | None = None
    sms_notifications: bool | None = None
    push_notifications: bool | None = None
    marketing_emails: bool | None = None
    currency: str | None = Field(None, min_length=3, max_length=3)
    measurement_unit: str | None = Field(None, pattern="^(IMPERIAL|METRIC)$")


class PreferencesResponse(BaseModel):
    preferred_deck_size: str | None
    preferred_brands: list[str]
    skill_level: SkillLevel
    riding_style: list[str]
    email_notifications: bool
    sms_notifications: bool
    push_notifications: bool
    marketing_emails: bool
    currency: str
    measurement_unit: str

    @classmethod
    def from_domain(cls, preferences: UserPreferences) -> "PreferencesResponse":
        return cls(
            preferred_deck_size=preferences.preferred_deck_size,
            preferred_brands=list(preferences.preferred_brands),
            skill_level=preferences.skill_level,
            riding_style=list(preferences.riding_style),
            email_notifications=preferences.email_notifications,
            sms_notifications=preferences.sms_notifications,
            push_notifications=preferences.push_notifications,
            marketing_emails=preferences.marketing_emails,
            currency=preferences.currency,
            measurement_unit=preferences.measurement_unit,
        )


class ProfileResponse(UserResponse):
    """The caller's account with addresses and preferences."""

    addresses: list[AddressResponse] = Field(default_factory=list)
    preferences: PreferencesResponse | None = None
