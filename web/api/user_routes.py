"""Admin moderation routes: list users, ban/unban/delete."""
from __future__ import annotations

from fastapi import APIRouter, Depends

from guestbook.services import UserService
from web.api.deps import get_user_service
from web.api.schemas import SuccessResponse, UserActionRequest, UserStatusResponse

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("", response_model=list[UserStatusResponse])
async def list_users(users: UserService = Depends(get_user_service)):
    """Non-admin users with their ban flag."""
    return [UserStatusResponse.model_validate(u) for u in await users.list_moderation_candidates()]


@router.post("/action", response_model=SuccessResponse)
async def user_action(body: UserActionRequest, users: UserService = Depends(get_user_service)):
    """ban, unban or delete. Reports success even when the user does not exist."""
    await users.perform_user_action(body.username or "", body.action or "")
    return SuccessResponse()
