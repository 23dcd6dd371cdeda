"""Upload, list and delete files (blob + metadata record)."""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Iterable

from guestbook.errors import BlobStoreError, ValidationError
from guestbook.models import FileRecord
from guestbook.services.blobs import BlobStore
from guestbook.services.store import GuestbookStore

logger = logging.getLogger("guestbook.files")


def iso_utc_now() -> str:
    """Current UTC time as 2026-10-19T08:00:00.000Z."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class FileService:
    def __init__(self, store: GuestbookStore, blobs: BlobStore):
        self.store = store
        self.blobs = blobs

    async def upload_files(self, files: Iterable[tuple[bytes, str]]) -> list[dict]:
        """Store each (content, original_name) pair. All records in one batch share an upload time."""
        files = list(files)
        if not files:
            raise ValidationError("No files uploaded")
        upload_time = iso_utc_now()
        uploaded = []
        for content, original_name in files:
            path = await self.blobs.store(content, original_name)
            await self.store.insert_file_record(original_name, path, upload_time)
            uploaded.append({"name": original_name, "data": path})
        return uploaded

    async def list_files(self) -> list[FileRecord]:
        return await self.store.list_files()

    async def delete_file(self, file_id: int) -> None:
        """Delete blob (if any) then the record. Unknown ids are a no-op."""
        path = await self.store.find_file_path(file_id)
        if path is not None:
            try:
                await self.blobs.delete(path)
            except BlobStoreError:
                logger.warning("Could not delete blob for file %s at %s; removing record anyway", file_id, path)
        await self.store.delete_file_record(file_id)
