"""User commands."""

from boardshop.application.commands.user.address_commands import (
    CreateAddressCommand,
    DeleteAddressCommand,
    UpdateAddressCommand,
)
from boardshop.application.commands.user.create_user_command import CreateUserCommand
from boardshop.application.commands.user.delete_user_command import DeleteUserCommand
from boardshop.application.commands.user.save_user_preferences_command import (
    SaveUserPreferencesCommand,
)
from boardshop.application.commands.user.update_profile_command import (
    UpdateProfileCommand,
)
from boardshop.application.commands.user.update_user_command import UpdateUserCommand
from boardshop.application.commands.user.upload_avatar_command import (
    ALLOWED_IMAGE_EXTENSIONS,
    AvatarChange,
    UploadAvatarCommand,
)

__all__ = [
    "ALLOWED_IMAGE_EXTENSIONS",
    "AvatarChange",
    "CreateAddressCommand",
    "CreateUserCommand",
    "DeleteAddressCommand",
    "DeleteUserCommand",
    "SaveUserPreferencesCommand",
    "UpdateAddressCommand",
    "UpdateProfileCommand",
    "UpdateUserCommand",
    "UploadAvatarCommand",
]
