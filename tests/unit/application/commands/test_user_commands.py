"""Unit tests for user and profile commands."""

from unittest.mock import AsyncMock, Mock
from uuid import uuid4

import pytest

from boardshop.application.commands.user import (
    CreateUserCommand,
    DeleteUserCommand,
    SaveUserPreferencesCommand,
    UpdateUserCommand,
    UploadAvatarCommand,
)
from boardshop.application.context import UserContext
from boardshop.domain.user import (
    CannotDeleteSelfError,
    EmailAlreadyExistsError,
    InvalidAvatarError,
    SkillLevel,
    User,
    UserHasOrdersError,
    UserNotFoundError,
    UserPreferences,
    UserRole,
)
from boardshop_auth.services import PasswordHashingService

TEST_EMAIL = "rider@example.com"
TEST_PASSWORD = "secure_password_123"
PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32


def _user(email: str = TEST_EMAIL, **kwargs) -> User:
    return User.create(email, password_hash="hashed_password", **kwargs)


class TestCreateUserCommand:
    def setup_method(self):
        self.user_repo = AsyncMock()
        self.user_repo.exists_by_email.return_value = False
        self.password_service = Mock(spec=PasswordHashingService)
        self.password_service.hash.return_value = "hashed_password"

        self.command = CreateUserCommand(
            user_repository=self.user_repo,
            password_service=self.password_service,
        )

    async def test_create_admin_user(self):
        user = await self.command.execute(
            email=TEST_EMAIL,
            password=TEST_PASSWORD,
            role=UserRole.ADMIN,
        )

        assert user.is_admin
        assert user.password_hash == "hashed_password"
        self.password_service.hash.assert_called_once_with(TEST_PASSWORD)
        self.user_repo.save.assert_awaited_once_with(user)

    async def test_duplicate_email_raises(self):
        self.user_repo.exists_by_email.return_value = True

        with pytest.raises(EmailAlreadyExistsError):
            await self.command.execute(email=TEST_EMAIL, password=TEST_PASSWORD)

        self.user_repo.save.assert_not_awaited()


class TestUpdateUserCommand:
    def setup_method(self):
        self.user_repo = AsyncMock()
        self.password_service = Mock(spec=PasswordHashingService)
        self.password_service.hash.return_value = "new_hash"
        self.command = UpdateUserCommand(
            user_repository=self.user_repo,
            password_service=self.password_service,
        )

    async def test_partial_update_keeps_other_fields(self):
        user = _user(first_name="Ann", last_name="Lee")
        self.user_repo.find_by_id.return_value = user

        updated = await self.command.execute(user.id, last_name="Hawk")

        assert updated.first_name == "Ann"
        assert updated.last_name == "Hawk"
        self.password_service.hash.assert_not_called()

    async def test_email_taken_by_other_user(self):
        user = _user()
        self.user_repo.find_by_id.return_value = user
        self.user_repo.find_by_email.return_value = _user("taken@example.com")

        with pytest.raises(EmailAlreadyExistsError):
            await self.command.execute(user.id, email="taken@example.com")

    async def test_role_and_activation_change(self):
        user = _user()
        self.user_repo.find_by_id.return_value = user

        await self.command.execute(user.id, role=UserRole.ADMIN, is_active=False)

        assert user.is_admin
        assert not user.is_active

    async def test_unknown_user(self):
        self.user_repo.find_by_id.return_value = None

        with pytest.raises(UserNotFoundError):
            await self.command.execute(uuid4(), first_name="Ann")


class TestDeleteUserCommand:
    def setup_method(self):
        self.user_repo = AsyncMock()
        self.order_repo = AsyncMock()
        self.command = DeleteUserCommand(
            user_repository=self.user_repo,
            order_repository=self.order_repo,
        )

    async def test_delete_user_without_orders(self):
        user = _user()
        self.user_repo.find_by_id.return_value = user
        self.order_repo.count_by_user.return_value = 0

        await self.command.execute(user_id=user.id, requesting_admin_id=uuid4())

        self.user_repo.delete.assert_awaited_once_with(user.id)

    async def test_delete_self_raises(self):
        admin_id = uuid4()

        with pytest.raises(CannotDeleteSelfError):
            await self.command.execute(user_id=admin_id, requesting_admin_id=admin_id)

        self.user_repo.delete.assert_not_awaited()

    async def test_user_with_orders_cannot_be_deleted(self):
        user = _user()
        self.user_repo.find_by_id.return_value = user
        self.order_repo.count_by_user.return_value = 2

        with pytest.raises(UserHasOrdersError) as exc_info:
            await self.command.execute(user_id=user.id, requesting_admin_id=uuid4())

        assert exc_info.value.details["order_count"] == 2
        self.user_repo.delete.assert_not_awaited()


class TestSaveUserPreferencesCommand:
    async def test_merges_into_existing_preferences(self):
        context = UserContext(user_id=uuid4(), email=TEST_EMAIL, role=UserRole.USER)
        preferences_repo = AsyncMock()
        preferences_repo.find_by_user_id.return_value = UserPreferences(
            preferred_brands=("Baker",),
            currency="EUR",
        )
        command = SaveUserPreferencesCommand(
            preferences_repository=preferences_repo,
            user_context=context,
        )

        saved = await command.execute(skill_level="ADVANCED", currency=None)

        assert saved.skill_level == SkillLevel.ADVANCED
        assert saved.preferred_brands == ("Baker",)
        assert saved.currency == "EUR"
        preferences_repo.save.assert_awaited_once_with(context.user_id, saved)


class TestUploadAvatarCommand:
    def setup_method(self):
        self.user = _user()
        self.user_repo = AsyncMock()
        self.user_repo.find_by_id.return_value = self.user
        self.storage = AsyncMock()
        self.storage.save.return_value = "/uploads/avatars/new.png"
        self.command = UploadAvatarCommand(
            user_repository=self.user_repo,
            file_storage=self.storage,
            user_context=UserContext.create(self.user),
            max_file_size=1024,
        )

    async def test_stores_image_and_updates_user(self):
        change = await self.command.execute("me.PNG", PNG_BYTES)

        assert change.user.avatar == "/uploads/avatars/new.png"
        assert change.url == "/uploads/avatars/new.png"
        assert change.replaced is None
        self.storage.save.assert_awaited_once_with(PNG_BYTES, "avatars", ".png")
        self.storage.delete.assert_not_awaited()

    async def test_previous_avatar_is_kept_until_discarded(self):
        self.user.update_profile(avatar="/uploads/avatars/old.png")

        change = await self.command.execute("me.jpg", PNG_BYTES)

        assert change.replaced == "/uploads/avatars/old.png"
        self.storage.delete.assert_not_awaited()

        await self.command.discard(change.replaced)

        self.storage.delete.assert_awaited_once_with("/uploads/avatars/old.png")

    async def test_discard_without_previous_avatar_is_noop(self):
        await self.command.discard(None)

        self.storage.delete.assert_not_awaited()

    @pytest.mark.parametrize(
        ("filename", "content"),
        [
            (None, PNG_BYTES),
            ("me.png", b""),
            ("notes.txt", b"hello"),
            ("archive.png.exe", PNG_BYTES),
            ("big.png", b"\x00" * 2048),
        ],
    )
    async def test_rejects_invalid_uploads(self, filename, content):
        with pytest.raises(InvalidAvatarError):
            await self.command.execute(filename, content)

        self.storage.save.assert_not_awaited()
        self.user_repo.save.assert_not_awaited()
