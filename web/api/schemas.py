"""Pydantic request/response schemas. JSON keys are camelCase as the front-end expects."""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Credentials(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None


class LoginResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    username: str
    is_admin: bool = Field(alias="isAdmin")


class MessageCreate(BaseModel):
    author: Optional[str] = None
    content: Optional[str] = None


class MessageResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    author: str
    content: str
    timestamp: str
    is_pinned: bool = Field(alias="isPinned")


class FileRecordResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    name: str
    path: str
    comment: Optional[str] = None
    upload_time: str = Field(alias="uploadTime")


class UploadedFile(BaseModel):
    name: str
    data: str  # access path under the uploads prefix


class UploadResponse(BaseModel):
    success: bool = True
    files: list[UploadedFile]


class UserStatusResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    username: str
    is_banned: bool = Field(alias="isBanned")


class UserActionRequest(BaseModel):
    username: Optional[str] = None
    action: Optional[str] = None


class SuccessResponse(BaseModel):
    success: bool = True
