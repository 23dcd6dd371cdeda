"""Guestbook: users, messages, uploaded files and admin moderation."""

__version__ = "1.0.0"
