"""Account registration, login and admin moderation."""
from __future__ import annotations

import enum
import logging

from guestbook.errors import ConflictError, DuplicateKeyError, ForbiddenError, UnauthorizedError, ValidationError
from guestbook.models import User
from guestbook.services.store import GuestbookStore

logger = logging.getLogger("guestbook.users")


class UserAction(str, enum.Enum):
    BAN = "ban"
    UNBAN = "unban"
    DELETE = "delete"


class UserService:
    def __init__(self, store: GuestbookStore):
        self.store = store

    async def ensure_admin(self, username: str, password: str, default_password: str | None = None) -> bool:
        """Seed the admin account on first startup. Returns True if it was created."""
        if not username or not password:
            logger.warning("Admin bootstrap skipped: username and password must be non-empty")
            return False
        created = await self.store.create_user_if_absent(username, password, is_admin=True)
        if created:
            logger.info("Initial admin created: username %s", username)
            if default_password is not None and password == default_password:
                logger.warning(
                    "Admin %s uses the built-in default password; set INITIAL_ADMIN_PASSWORD or change it", username
                )
        return created

    async def register(self, username: str, password: str) -> User:
        if not username or not password:
            raise ValidationError("Username and password are required")
        if await self.store.find_user_by_username(username):
            raise ConflictError()
        try:
            user = await self.store.insert_user(username, password)
        except DuplicateKeyError as e:
            raise ConflictError() from e
        logger.info("Registered user %s", username)
        return user

    async def login(self, username: str, password: str) -> User:
        """Credentials are checked before the ban flag, so banned accounts get 403 only with the right password."""
        user = await self.store.find_user_by_credentials(username, password)
        if not user:
            raise UnauthorizedError()
        if user.is_banned:
            raise ForbiddenError()
        return user

    async def list_moderation_candidates(self) -> list[User]:
        return await self.store.list_non_admin_users()

    async def perform_user_action(self, username: str, action: str) -> None:
        """Apply ban/unban/delete. Unknown usernames and actions are silent no-ops.

        ban and delete each issue two independent writes; a failure between them
        leaves the first one applied.
        """
        try:
            action = UserAction(action)
        except ValueError:
            logger.warning("Ignoring unknown user action %r for %s", action, username)
            return
        if action is UserAction.BAN:
            await self.store.set_user_banned(username, True)
            removed = await self.store.delete_messages_by_author(username)
            logger.info("Banned %s, removed %d message(s)", username, removed)
        elif action is UserAction.UNBAN:
            await self.store.set_user_banned(username, False)
            logger.info("Unbanned %s", username)
        elif action is UserAction.DELETE:
            await self.store.delete_user(username)
            removed = await self.store.delete_messages_by_author(username)
            logger.info("Deleted user %s, removed %d message(s)", username, removed)
