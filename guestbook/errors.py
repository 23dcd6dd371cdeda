"""Domain errors raised by the store and service layer.

Each error carries the HTTP status the API answers with and a human-readable
message that ends up in the ``{"error": ...}`` response body.
"""
from __future__ import annotations


class GuestbookError(Exception):
    """Base class for all guestbook errors."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(GuestbookError):
    """A required field is missing or empty."""

    status_code = 400
    default_message = "Required field missing"


class ConflictError(GuestbookError):
    """Username already taken."""

    status_code = 400
    default_message = "Username already exists"


class UnauthorizedError(GuestbookError):
    status_code = 401
    default_message = "Invalid username or password"


class ForbiddenError(GuestbookError):
    status_code = 403
    default_message = "Account is banned"


class StoreError(GuestbookError):
    """Underlying database or filesystem failure. Message is generic; details are logged."""

    status_code = 500
    default_message = "Storage error"


class BlobStoreError(StoreError):
    default_message = "File storage error"


class DuplicateKeyError(StoreError):
    """Unique constraint violated on insert. Services translate this to ConflictError."""

    default_message = "Duplicate key"
