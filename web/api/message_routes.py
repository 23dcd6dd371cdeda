"""Message board API routes."""
from __future__ import annotations

from fastapi import APIRouter, Depends

from guestbook.services import MessageService
from web.api.deps import get_message_service
from web.api.schemas import MessageCreate, MessageResponse, SuccessResponse

router = APIRouter(prefix="/api/messages", tags=["messages"])


@router.get("", response_model=list[MessageResponse])
async def list_messages(messages: MessageService = Depends(get_message_service)):
    """All messages, newest first. Pinned messages are flagged, not reordered."""
    return [MessageResponse.model_validate(m) for m in await messages.list_messages()]


@router.post("", response_model=SuccessResponse)
async def post_message(body: MessageCreate, messages: MessageService = Depends(get_message_service)):
    await messages.post_message(body.author or "", body.content or "")
    return SuccessResponse()


@router.delete("/{message_id}", response_model=SuccessResponse)
async def delete_message(message_id: int, messages: MessageService = Depends(get_message_service)):
    await messages.delete_message(message_id)
    return SuccessResponse()


@router.post("/{message_id}/pin", response_model=SuccessResponse)
async def toggle_pin(message_id: int, messages: MessageService = Depends(get_message_service)):
    """Flip the pin flag."""
    await messages.toggle_pin(message_id)
    return SuccessResponse()
