"""Port for storing uploaded files."""

from typing import Protocol


class FileStoragePort(Protocol):
    """Stores file content and returns the public URL it is served from."""

    async def save(self, content: bytes, folder: str, extension: str) -> str:
        """
        Persist ``content`` under a fresh name in ``folder``.

        Parameters
        ----------
        content
            Raw file bytes
        folder
            Sub-folder of the upload root (e.g. ``avatars``)
        extension
            File extension including the dot (e.g. ``.png``)

        Returns
        -------
        Public URL path of the stored file
        """
        ...

    async def delete(self, url: str) -> None:
        """Remove a previously stored file; unknown URLs are ignored."""
        ...
