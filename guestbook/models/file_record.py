"""Uploaded file metadata model."""
from __future__ import annotations

from typing import Optional

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from guestbook.models.base import Base


class FileRecord(Base):
    """Index from record id to blob location. Deleting the row orphans the blob."""

    __tablename__ = "files"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)  # original filename
    path: Mapped[str] = mapped_column(String(255), nullable=False)  # public access path, e.g. /uploads/files-...
    comment: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    upload_time: Mapped[str] = mapped_column("uploadTime", String(32), nullable=False)  # ISO-8601 UTC
