"""FastAPI dependencies that hand out the services built by create_app()."""
from __future__ import annotations

from fastapi import Request

from guestbook.services import FileService, MessageService, UserService


def get_user_service(request: Request) -> UserService:
    return request.app.state.user_service


def get_message_service(request: Request) -> MessageService:
    return request.app.state.message_service


def get_file_service(request: Request) -> FileService:
    return request.app.state.file_service
