"""Database models."""
from guestbook.models.base import Base, init_db, make_engine, make_session_factory
from guestbook.models.user import User
from guestbook.models.message import Message
from guestbook.models.file_record import FileRecord

__all__ = [
    "Base",
    "User",
    "Message",
    "FileRecord",
    "init_db",
    "make_engine",
    "make_session_factory",
]
