"""File upload API routes."""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, File, UploadFile

from guestbook.services import FileService
from web.api.deps import get_file_service
from web.api.schemas import FileRecordResponse, SuccessResponse, UploadedFile, UploadResponse

router = APIRouter(prefix="/api", tags=["files"])


@router.post("/upload", response_model=UploadResponse)
async def upload_files(
    files: Optional[list[UploadFile]] = File(None),
    file_service: FileService = Depends(get_file_service),
):
    """Store every part of the multipart "files" field."""
    batch = []
    for upload in files or []:
        batch.append((await upload.read(), upload.filename or ""))
    uploaded = await file_service.upload_files(batch)
    return UploadResponse(files=[UploadedFile(**f) for f in uploaded])


@router.get("/files", response_model=list[FileRecordResponse])
async def list_files(file_service: FileService = Depends(get_file_service)):
    return [FileRecordResponse.model_validate(f) for f in await file_service.list_files()]


@router.delete("/files/{file_id}", response_model=SuccessResponse)
async def delete_file(file_id: int, file_service: FileService = Depends(get_file_service)):
    """Delete the blob and its record. Unknown ids still report success."""
    await file_service.delete_file(file_id)
    return SuccessResponse()
