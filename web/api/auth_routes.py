"""Auth API routes: register and login."""
from __future__ import annotations

from fastapi import APIRouter, Depends

from guestbook.services import UserService
from web.api.deps import get_user_service
from web.api.schemas import Credentials, LoginResponse, SuccessResponse

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/register", response_model=SuccessResponse)
async def register(body: Credentials, users: UserService = Depends(get_user_service)):
    """Create a regular (non-admin) account."""
    await users.register(body.username or "", body.password or "")
    return SuccessResponse()


@router.post("/login", response_model=LoginResponse)
async def login(body: Credentials, users: UserService = Depends(get_user_service)):
    """Check credentials. No session or token is issued; the front-end keeps the returned identity."""
    user = await users.login(body.username or "", body.password or "")
    return LoginResponse(username=user.username, is_admin=user.is_admin)
