"""Store handles and the service layer built on them."""
from guestbook.services.blobs import BlobStore
from guestbook.services.files import FileService
from guestbook.services.messages import MessageService
from guestbook.services.store import GuestbookStore
from guestbook.services.users import UserAction, UserService

__all__ = [
    "BlobStore",
    "FileService",
    "GuestbookStore",
    "MessageService",
    "UserAction",
    "UserService",
]
