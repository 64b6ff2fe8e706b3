"""Users router: administration, profile, addresses, preferences, avatar."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, File, UploadFile, status

from boardshop.application.commands.user import (
    CreateAddressCommand,
    CreateUserCommand,
    DeleteAddressCommand,
    DeleteUserCommand,
    SaveUserPreferencesCommand,
    UpdateAddressCommand,
    UpdateProfileCommand,
    UpdateUserCommand,
    UploadAvatarCommand,
)
from boardshop.application.queries.user import (
    GetProfileQuery,
    GetUserPreferencesQuery,
    GetUserQuery,
    ListAddressesQuery,
    ListUsersQuery,
)
from boardshop.presentation.api.access_control import authorize
from boardshop.presentation.api.dependencies import (
    FileStorage,
    PasswordServiceDep,
    RepoFactory,
    SettingsDep,
)
from boardshop.presentation.api.schemas.auth import UserResponse
from boardshop.presentation.api.schemas.common import MessageResponse
from boardshop.presentation.api.schemas.users import (
    AddressCreateRequest,
    AddressResponse,
    AddressUpdateRequest,
    CreateUserRequest,
    PreferencesRequest,
    PreferencesResponse,
    ProfileResponse,
    UpdateProfileRequest,
    UpdateUserRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(authorize)])


# -----------------------------------------------------------------------------
# Administration
# -----------------------------------------------------------------------------


@router.get(
    "",
    summary="List all users",
    responses={403: {"description": "Admin access required"}},
)
async def list_users(factory: RepoFactory) -> list[UserResponse]:
    """List all user accounts, newest first."""
    users = await ListUsersQuery.from_factory(factory).execute()
    return [UserResponse.from_domain(u) for u in users]


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a user",
    responses={
        201: {"description": "User created"},
        403: {"description": "Admin access required"},
        409: {"description": "Email already registered"},
    },
)
async def create_user(
    request: CreateUserRequest,
    factory: RepoFactory,
    password_service: PasswordServiceDep,
) -> UserResponse:
    """Create an account with any role."""
    command = CreateUserCommand.from_factory(factory, password_service)

    try:
        user = await command.execute(
            email=request.email,
            password=request.password,
            role=request.role,
            is_active=request.is_active,
            first_name=request.first_name,
            last_name=request.last_name,
            phone=request.phone,
            date_of_birth=request.date_of_birth,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    logger.info("Admin %s created user: %s", factory.user_context.email, user.email)
    return UserResponse.from_domain(user)


# -----------------------------------------------------------------------------
# Profile (current user)
# -----------------------------------------------------------------------------


@router.get("/profile", summary="Get own profile")
async def get_profile(factory: RepoFactory) -> ProfileResponse:
    """Own account with addresses (default first) and preferences."""
    profile = await GetProfileQuery.from_factory(factory).execute()
    return ProfileResponse(
        **UserResponse.from_domain(profile.user).model_dump(),
        addresses=[AddressResponse.from_domain(a) for a in profile.addresses],
        preferences=(
            PreferencesResponse.from_domain(profile.preferences)
            if profile.preferences
            else None
        ),
    )


@router.put(
    "/profile",
    summary="Update own profile",
    responses={400: {"description": "Invalid input (weak password)"}},
)
async def update_profile(
    request: UpdateProfileRequest,
    factory: RepoFactory,
    password_service: PasswordServiceDep,
) -> UserResponse:
    """Update name, phone, birth date, avatar URL or password."""
    command = UpdateProfileCommand.from_factory(factory, password_service)

    try:
        user = await command.execute(
            first_name=request.first_name,
            last_name=request.last_name,
            phone=request.phone,
            date_of_birth=request.date_of_birth,
            avatar=request.avatar,
            password=request.password,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return UserResponse.from_domain(user)


@router.post(
    "/avatar",
    summary="Upload avatar image",
    responses={400: {"description": "Missing file, wrong type or too large"}},
)
async def upload_avatar(
    factory: RepoFactory,
    storage: FileStorage,
    settings: SettingsDep,
    avatar: UploadFile = File(..., description="jpeg, jpg, png, gif or webp"),
) -> UserResponse:
    """Store an avatar image and set it as the profile picture."""
    content = await avatar.read()
    command = UploadAvatarCommand.from_factory(
        factory,
        file_storage=storage,
        max_file_size=settings.upload_max_file_size,
    )

    change = None
    try:
        change = await command.execute(filename=avatar.filename, content=content)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        if change is not None:
            await command.discard(change.url)
        raise

    await command.discard(change.replaced)
    return UserResponse.from_domain(change.user)


# -----------------------------------------------------------------------------
# Addresses (current user)
# -----------------------------------------------------------------------------


@router.get("/addresses", summary="List own addresses")
async def list_addresses(factory: RepoFactory) -> list[AddressResponse]:
    addresses = await ListAddressesQuery.from_factory(factory).execute()
    return [AddressResponse.from_domain(a) for a in addresses]


@router.post(
    "/addresses",
    status_code=status.HTTP_201_CREATED,
    summary="Add an address",
)
async def create_address(
    request: AddressCreateRequest,
    factory: RepoFactory,
) -> AddressResponse:
    """
    Add an address.

    Flagging it as default clears the previous default of the same type.
    """
    command = CreateAddressCommand.from_factory(factory)

    try:
        address = await command.execute(**request.model_dump())
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return AddressResponse.from_domain(address)


@router.put(
    "/addresses/{address_id}",
    summary="Update an address",
    responses={404: {"description": "Address not found"}},
)
async def update_address(
    address_id: UUID,
    request: AddressUpdateRequest,
    factory: RepoFactory,
) -> AddressResponse:
    command = UpdateAddressCommand.from_factory(factory)

    try:
        address = await command.execute(
            address_id,
            **request.model_dump(exclude_unset=True),
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return AddressResponse.from_domain(address)


@router.delete(
    "/addresses/{address_id}",
    summary="Delete an address",
    responses={404: {"description": "Address not found"}},
)
async def delete_address(address_id: UUID, factory: RepoFactory) -> MessageResponse:
    command = DeleteAddressCommand.from_factory(factory)

    try:
        await command.execute(address_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return MessageResponse(message="Address deleted")


# -----------------------------------------------------------------------------
# Preferences (current user)
# -----------------------------------------------------------------------------


@router.get("/preferences", summary="Get own preferences")
async def get_preferences(factory: RepoFactory) -> PreferencesResponse | None:
    """Stored preferences, or null when none were saved yet."""
    preferences = await GetUserPreferencesQuery.from_factory(factory).execute()
    return PreferencesResponse.from_domain(preferences) if preferences else None


@router.post("/preferences", summary="Save own preferences")
async def save_preferences(
    request: PreferencesRequest,
    factory: RepoFactory,
) -> PreferencesResponse:
    """Create or update preferences; omitted fields keep their value."""
    command = SaveUserPreferencesCommand.from_factory(factory)

    try:
        preferences = await command.execute(**request.model_dump(exclude_unset=True))
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return PreferencesResponse.from_domain(preferences)


# -----------------------------------------------------------------------------
# Administration by id (declared last so static paths match first)
# -----------------------------------------------------------------------------


@router.get(
    "/{user_id}",
    summary="Get a user",
    responses={404: {"description": "User not found"}},
)
async def get_user(user_id: UUID, factory: RepoFactory) -> UserResponse:
    user = await GetUserQuery.from_factory(factory).execute(user_id)
    return UserResponse.from_domain(user)


@router.put(
    "/{user_id}",
    summary="Update a user",
    responses={
        404: {"description": "User not found"},
        409: {"description": "Email already registered"},
    },
)
async def update_user(
    user_id: UUID,
    request: UpdateUserRequest,
    factory: RepoFactory,
    password_service: PasswordServiceDep,
) -> UserResponse:
    """Update any field of an account, including role and activation."""
    command = UpdateUserCommand.from_factory(factory, password_service)

    try:
        user = await command.execute(user_id, **request.model_dump(exclude_unset=True))
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return UserResponse.from_domain(user)


@router.delete(
    "/{user_id}",
    summary="Delete a user",
    responses={
        400: {"description": "Cannot delete yourself"},
        404: {"description": "User not found"},
        409: {"description": "User has orders; deactivate instead"},
    },
)
async def delete_user(user_id: UUID, factory: RepoFactory) -> MessageResponse:
    command = DeleteUserCommand.from_factory(factory)

    try:
        await command.execute(
            user_id=user_id,
            requesting_admin_id=factory.user_context.user_id,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    logger.info("Admin %s deleted user %s", factory.user_context.email, user_id)
    return MessageResponse(message="User deleted")
