"""Store an uploaded avatar image and attach it to the current user."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import PurePath
from typing import TYPE_CHECKING, Optional

from boardshop.application.context import UserContext
from boardshop.application.ports import FileStoragePort
from boardshop.domain.user import (
    InvalidAvatarError,
    User,
    UserNotFoundError,
    UserRepository,
)

if TYPE_CHECKING:
    from boardshop.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)

ALLOWED_IMAGE_EXTENSIONS = frozenset({".jpeg", ".jpg", ".png", ".gif", ".webp"})
AVATAR_FOLDER = "avatars"


@dataclass(frozen=True)
class AvatarChange:
    """Result of an avatar upload; ``replaced`` is the stored file it supersedes."""

    user: User
    url: str
    replaced: Optional[str] = None


class UploadAvatarCommand:
    """Validate and store an avatar image, then point the user's avatar at it."""

    def __init__(
        self,
        user_repository: UserRepository,
        file_storage: FileStoragePort,
        user_context: UserContext,
        max_file_size: int,
    ):
        self._user_repo = user_repository
        self._storage = file_storage
        self._user_context = user_context
        self._max_file_size = max_file_size

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        file_storage: FileStoragePort,
        max_file_size: int,
    ) -> UploadAvatarCommand:
        return cls(
            user_repository=factory.user_repository(),
            file_storage=file_storage,
            user_context=factory.user_context,
            max_file_size=max_file_size,
        )

    async def execute(self, filename: Optional[str], content: bytes) -> AvatarChange:
        """
        Store the avatar and update the user.

        The superseded file is left in place; call ``discard`` with
        ``AvatarChange.replaced`` once the change is committed, or with
        ``AvatarChange.url`` if it is rolled back.

        Raises
        ------
        InvalidAvatarError
            If no file was sent, the extension is not an allowed image type,
            or the file exceeds the size limit
        """
        extension = self._validate(filename, content)

        user = await self._user_repo.find_by_id(self._user_context.user_id)
        if user is None:
            raise UserNotFoundError(self._user_context.user_id)

        previous = user.avatar
        url = await self._storage.save(content, AVATAR_FOLDER, extension)
        user.update_profile(avatar=url)
        await self._user_repo.save(user)

        logger.info("Avatar updated for user %s: %s", user.id, url)
        return AvatarChange(user=user, url=url, replaced=previous)

    async def discard(self, url: Optional[str]) -> None:
        """Remove a stored avatar file; URLs outside the upload area are ignored."""
        if url:
            await self._storage.delete(url)

    def _validate(self, filename: Optional[str], content: bytes) -> str:
        if not filename or not content:
            msg = "No file uploaded"
            raise InvalidAvatarError(msg, filename)

        extension = PurePath(filename).suffix.lower()
        if extension not in ALLOWED_IMAGE_EXTENSIONS:
            msg = "Invalid file type. Only images (jpeg, jpg, png, gif, webp) are allowed"
            raise InvalidAvatarError(msg, filename)

        if len(content) > self._max_file_size:
            limit_mb = self._max_file_size / (1024 * 1024)
            msg = f"File size too large. Maximum size is {limit_mb:g}MB"
            raise InvalidAvatarError(msg, filename)

        return extension
