"""Filesystem blob store for uploaded files."""
from __future__ import annotations

import logging
import random
import time
from pathlib import Path, PurePosixPath

from starlette.concurrency import run_in_threadpool

from guestbook.errors import BlobStoreError

logger = logging.getLogger("guestbook.blobs")

FIELD_PREFIX = "files"


class BlobStore:
    """Stores uploaded bytes under one directory, addressed by public access paths."""

    def __init__(self, upload_dir: Path | str, url_prefix: str = "/uploads"):
        self.upload_dir = Path(upload_dir)
        self.url_prefix = "/" + url_prefix.strip("/")

    def ensure_dir(self) -> None:
        self.upload_dir.mkdir(parents=True, exist_ok=True)

    def generate_name(self, original_name: str) -> str:
        """files-<epoch ms>-<random below 1e9><original extension>."""
        suffix = PurePosixPath(original_name or "").suffix
        return f"{FIELD_PREFIX}-{int(time.time() * 1000)}-{random.randrange(1_000_000_000)}{suffix}"

    def access_path(self, filename: str) -> str:
        return f"{self.url_prefix}/{filename}"

    def _resolve(self, path: str) -> Path:
        # Only the last component is honoured; stored paths cannot escape upload_dir.
        return self.upload_dir / PurePosixPath(path).name

    async def store(self, content: bytes, original_name: str) -> str:
        """Write content to a new blob and return its access path."""
        filename = self.generate_name(original_name)
        target = self.upload_dir / filename
        try:
            await run_in_threadpool(target.write_bytes, content)
        except OSError as e:
            logger.exception("Failed to write blob %s", target)
            raise BlobStoreError() from e
        logger.info("Stored %s (%d bytes) as %s", original_name, len(content), filename)
        return self.access_path(filename)

    async def exists(self, path: str) -> bool:
        return await run_in_threadpool(self._resolve(path).is_file)

    async def delete(self, path: str) -> bool:
        """Remove the blob behind an access path. Returns False if it was already gone."""
        if not PurePosixPath(path).name:
            return False
        target = self._resolve(path)
        try:
            await run_in_threadpool(target.unlink)
        except FileNotFoundError:
            logger.info("Blob %s already missing, skipping delete", target)
            return False
        except OSError as e:
            logger.exception("Failed to delete blob %s", target)
            raise BlobStoreError() from e
        return True
