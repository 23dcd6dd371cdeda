"""Guestbook message board operations."""
from __future__ import annotations

from datetime import datetime

from guestbook.errors import ValidationError
from guestbook.models import Message
from guestbook.services.store import GuestbookStore

DEFAULT_TIMESTAMP_FORMAT = "%Y/%m/%d %H:%M:%S"


class MessageService:
    def __init__(self, store: GuestbookStore, timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT):
        self.store = store
        self.timestamp_format = timestamp_format

    def _now(self) -> str:
        return datetime.now().strftime(self.timestamp_format)

    async def post_message(self, author: str, content: str) -> Message:
        if not author or not content:
            raise ValidationError("Author and content are required")
        return await self.store.insert_message(author, content, self._now())

    async def list_messages(self) -> list[Message]:
        return await self.store.list_messages()

    async def delete_message(self, message_id: int) -> None:
        # No ownership check: any caller may delete any message.
        await self.store.delete_message(message_id)

    async def toggle_pin(self, message_id: int) -> None:
        await self.store.toggle_message_pin(message_id)
