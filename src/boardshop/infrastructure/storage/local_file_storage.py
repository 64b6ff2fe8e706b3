"""Filesystem-backed storage for uploaded files."""

import asyncio
import logging
from pathlib import Path, PurePosixPath
from typing import Union
from uuid import uuid4

logger = logging.getLogger(__name__)


class LocalFileStorage:
    """
    Stores uploads below a root directory served at ``url_prefix``.

    Files get a random ``<uuid4><extension>`` name so client-supplied file
    names never reach the filesystem.
    """

    def __init__(self, upload_dir: Union[str, Path], url_prefix: str = "/uploads"):
        self._root = Path(upload_dir)
        self._url_prefix = url_prefix.rstrip("/")

    @property
    def root(self) -> Path:
        return self._root

    async def save(self, content: bytes, folder: str, extension: str) -> str:
        target_dir = self._root / folder
        filename = f"{uuid4()}{extension.lower()}"
        target = target_dir / filename

        await asyncio.to_thread(self._write, target, content)
        logger.debug("Stored %d bytes at %s", len(content), target)
        return f"{self._url_prefix}/{folder}/{filename}"

    async def delete(self, url: str) -> None:
        path = self._path_for_url(url)
        if path is None:
            return
        await asyncio.to_thread(path.unlink, missing_ok=True)
        logger.debug("Removed stored file %s", path)

    def _path_for_url(self, url: str) -> Union[Path, None]:
        prefix = f"{self._url_prefix}/"
        if not url or not url.startswith(prefix):
            return None
        relative = PurePosixPath(url[len(prefix):])
        if ".." in relative.parts or relative.is_absolute():
            return None
        return self._root.joinpath(*relative.parts)

    @staticmethod
    def _write(target: Path, content: bytes) -> None:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(content)
