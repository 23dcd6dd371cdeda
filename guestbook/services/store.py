"""Persistent store: async SQLAlchemy access to users, messages and files.

Every public coroutine opens its own session and commits at most once, so
multi-step operations built on top of the store (ban, delete user) are not
atomic.
"""
from __future__ import annotations

import functools
import logging
from typing import Awaitable, Callable, Optional, TypeVar

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from guestbook.errors import DuplicateKeyError, StoreError
from guestbook.models import FileRecord, Message, User, init_db, make_engine, make_session_factory
from guestbook.passwords import hash_password, verify_and_update

logger = logging.getLogger("guestbook.store")

T = TypeVar("T")


def _store_op(fn: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
    """Convert driver-level failures into StoreError. No retry."""

    @functools.wraps(fn)
    async def wrapper(*args, **kwargs):
        try:
            return await fn(*args, **kwargs)
        except SQLAlchemyError as e:
            logger.exception("Store operation %s failed", fn.__name__)
            raise StoreError() from e

    return wrapper


class GuestbookStore:
    """Handle over the guestbook database. Built once by the app and injected into services."""

    def __init__(self, database_url: str):
        self.database_url = database_url
        self._engine = make_engine(database_url)
        self._session_factory = make_session_factory(self._engine)

    @_store_op
    async def init(self) -> None:
        """Create tables if they don't exist."""
        await init_db(self._engine)

    async def close(self) -> None:
        await self._engine.dispose()

    # --- users ---

    @_store_op
    async def create_user_if_absent(self, username: str, password: str, is_admin: bool = False) -> bool:
        """Insert the user unless the username is taken. Returns True if a row was created."""
        async with self._session_factory() as session:
            result = await session.execute(select(User.id).where(User.username == username))
            if result.scalar_one_or_none() is not None:
                return False
            password_hash = await hash_password(password)
            session.add(User(username=username, password_hash=password_hash, is_admin=is_admin))
            await session.commit()
            return True

    @_store_op
    async def find_user_by_username(self, username: str) -> Optional[User]:
        async with self._session_factory() as session:
            result = await session.execute(select(User).where(User.username == username))
            return result.scalar_one_or_none()

    async def find_user_by_credentials(self, username: str, password: str) -> Optional[User]:
        """Return the user only if username and password both match.

        Legacy plaintext passwords are rehashed on a successful match.
        """
        user = await self.find_user_by_username(username)
        if user is None:
            return None
        valid, new_hash = await verify_and_update(password, user.password_hash)
        if not valid:
            return None
        if new_hash:
            await self.set_password_hash(user.id, new_hash)
            user.password_hash = new_hash
        return user

    @_store_op
    async def set_password_hash(self, user_id: int, password_hash: str) -> None:
        async with self._session_factory() as session:
            await session.execute(update(User).where(User.id == user_id).values(password_hash=password_hash))
            await session.commit()

    @_store_op
    async def insert_user(self, username: str, password: str) -> User:
        async with self._session_factory() as session:
            user = User(username=username, password_hash=await hash_password(password))
            session.add(user)
            try:
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                raise DuplicateKeyError(f"Username {username!r} exists") from e
            await session.refresh(user)
            return user

    @_store_op
    async def list_non_admin_users(self) -> list[User]:
        async with self._session_factory() as session:
            result = await session.execute(select(User).where(User.is_admin.is_(False)).order_by(User.id))
            return list(result.scalars().all())

    @_store_op
    async def set_user_banned(self, username: str, banned: bool) -> None:
        async with self._session_factory() as session:
            await session.execute(update(User).where(User.username == username).values(is_banned=banned))
            await session.commit()

    @_store_op
    async def delete_user(self, username: str) -> None:
        async with self._session_factory() as session:
            await session.execute(delete(User).where(User.username == username))
            await session.commit()

    # --- messages ---

    @_store_op
    async def list_messages(self) -> list[Message]:
        """All messages, newest id first. Pinned messages are not reordered."""
        async with self._session_factory() as session:
            result = await session.execute(select(Message).order_by(Message.id.desc()))
            return list(result.scalars().all())

    @_store_op
    async def insert_message(self, author: str, content: str, timestamp: str) -> Message:
        async with self._session_factory() as session:
            message = Message(author=author, content=content, timestamp=timestamp, is_pinned=False)
            session.add(message)
            await session.commit()
            await session.refresh(message)
            return message

    @_store_op
    async def delete_message(self, message_id: int) -> None:
        async with self._session_factory() as session:
            await session.execute(delete(Message).where(Message.id == message_id))
            await session.commit()

    @_store_op
    async def toggle_message_pin(self, message_id: int) -> None:
        """Flip is_pinned in a single UPDATE. Missing ids match no rows."""
        async with self._session_factory() as session:
            await session.execute(
                update(Message).where(Message.id == message_id).values(is_pinned=~Message.is_pinned)
            )
            await session.commit()

    @_store_op
    async def delete_messages_by_author(self, author: str) -> int:
        async with self._session_factory() as session:
            result = await session.execute(delete(Message).where(Message.author == author))
            await session.commit()
            return result.rowcount or 0

    # --- files ---

    @_store_op
    async def insert_file_record(self, name: str, path: str, upload_time: str) -> FileRecord:
        async with self._session_factory() as session:
            record = FileRecord(name=name, path=path, upload_time=upload_time)
            session.add(record)
            await session.commit()
            await session.refresh(record)
            return record

    @_store_op
    async def list_files(self) -> list[FileRecord]:
        async with self._session_factory() as session:
            result = await session.execute(select(FileRecord).order_by(FileRecord.id.desc()))
            return list(result.scalars().all())

    @_store_op
    async def find_file_path(self, file_id: int) -> Optional[str]:
        async with self._session_factory() as session:
            result = await session.execute(select(FileRecord.path).where(FileRecord.id == file_id))
            return result.scalar_one_or_none()

    @_store_op
    async def delete_file_record(self, file_id: int) -> None:
        async with self._session_factory() as session:
            await session.execute(delete(FileRecord).where(FileRecord.id == file_id))
            await session.commit()
