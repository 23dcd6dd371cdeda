"""Guestbook account model."""
from __future__ import annotations

from sqlalchemy import Boolean, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from guestbook.models.base import Base


class User(Base):
    """Registered account. Admins are seeded at startup, never via registration."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(64), unique=True, nullable=False, index=True)
    password_hash: Mapped[str] = mapped_column("password", String(256), nullable=False)
    is_admin: Mapped[bool] = mapped_column("isAdmin", Boolean, nullable=False, default=False)
    is_banned: Mapped[bool] = mapped_column("isBanned", Boolean, nullable=False, default=False)
