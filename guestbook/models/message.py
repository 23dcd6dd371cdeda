"""Guestbook message model."""
from __future__ import annotations

from sqlalchemy import Boolean, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from guestbook.models.base import Base


class Message(Base):
    """Posted message. author is the poster's username as text, not a foreign key."""

    __tablename__ = "messages"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    author: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    timestamp: Mapped[str] = mapped_column(String(32), nullable=False)  # server local time, display-formatted
    is_pinned: Mapped[bool] = mapped_column("isPinned", Boolean, nullable=False, default=False)
