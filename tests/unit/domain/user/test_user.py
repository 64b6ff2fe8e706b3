"""Tests for the user domain."""

from uuid import uuid4

import pytest

from boardshop.domain.shared.exceptions import ValidationError
from boardshop.domain.user import (
    Address,
    AddressType,
    InvalidEmailError,
    SkillLevel,
    User,
    UserPreferences,
    UserRole,
)


class TestUser:
    def test_create_normalizes_email(self):
        user = User.create("  Rider@Example.COM ", password_hash="hash")

        assert user.email == "rider@example.com"
        assert user.role == UserRole.USER
        assert user.is_active

    def test_invalid_email_rejected(self):
        with pytest.raises(InvalidEmailError):
            User.create("not-an-email", password_hash="hash")

    def test_update_profile_keeps_unset_fields(self):
        user = User.create("rider@example.com", password_hash="hash", first_name="Ann")

        user.update_profile(last_name="Lee")

        assert user.first_name == "Ann"
        assert user.last_name == "Lee"

    def test_role_and_activation(self):
        user = User.create("rider@example.com", password_hash="hash")

        user.change_role("ADMIN")
        user.deactivate()

        assert user.is_admin
        assert not user.is_active

    def test_identity_equality(self):
        user = User.create("rider@example.com", password_hash="hash")
        same = User.reconstitute(
            id=user.id,
            email="other@example.com",
            password_hash="x",
            role=UserRole.USER,
            is_active=True,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

        assert user == same
        assert hash(user) == hash(same)


class TestAddress:
    def test_type_is_coerced(self):
        address = Address(
            user_id=uuid4(),
            first_name="Ann",
            last_name="Lee",
            address_line1="1 Ramp Rd",
            city="Venice",
            state="CA",
            postal_code="90291",
            type="BILLING",
        )

        assert address.type == AddressType.BILLING
        assert address.country == "US"
        assert not address.is_default

    def test_user_id_cannot_be_updated(self):
        address = Address(
            user_id=uuid4(),
            first_name="Ann",
            last_name="Lee",
            address_line1="1 Ramp Rd",
            city="Venice",
            state="CA",
            postal_code="90291",
        )

        with pytest.raises(AttributeError):
            address.update(user_id=uuid4())

    def test_optional_fields_can_be_cleared(self):
        address = Address(
            user_id=uuid4(),
            first_name="Ann",
            last_name="Lee",
            company="Ramp Co",
            address_line1="1 Ramp Rd",
            address_line2="Unit 4",
            city="Venice",
            state="CA",
            postal_code="90291",
            phone="555-0100",
        )

        address.update(company=None, address_line2=None, phone=None)

        assert address.company is None
        assert address.address_line2 is None
        assert address.phone is None
        assert address.city == "Venice"

    def test_required_field_cannot_be_cleared(self):
        address = Address(
            user_id=uuid4(),
            first_name="Ann",
            last_name="Lee",
            address_line1="1 Ramp Rd",
            city="Venice",
            state="CA",
            postal_code="90291",
        )

        with pytest.raises(ValidationError):
            address.update(phone="555-0100", city=None)

        assert address.city == "Venice"
        assert address.phone is None


class TestUserPreferences:
    def test_defaults(self):
        preferences = UserPreferences()

        assert preferences.skill_level == SkillLevel.BEGINNER
        assert preferences.currency == "USD"
        assert preferences.measurement_unit == "IMPERIAL"

    def test_with_updates_keeps_unset_values(self):
        preferences = UserPreferences(preferred_brands=["Baker"])

        updated = preferences.with_updates(skill_level="ADVANCED", currency=None)

        assert updated.skill_level == SkillLevel.ADVANCED
        assert updated.preferred_brands == ("Baker",)
        assert updated.currency == "USD"
        assert preferences.skill_level == SkillLevel.BEGINNER
