"""Configuration for the guestbook server."""
from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

_ROOT = Path(__file__).parent

# Database
DATABASE_URL = os.getenv(
    "DATABASE_URL",
    f"sqlite+aiosqlite:///{_ROOT / 'guestbook.db'}",
)

# Uploaded blobs live on disk and are served read-only under UPLOAD_URL_PREFIX
UPLOAD_DIR = Path(os.getenv("UPLOAD_DIR", str(_ROOT / "uploads")))
UPLOAD_URL_PREFIX = "/" + os.getenv("UPLOAD_URL_PREFIX", "/uploads").strip("/")

# Front-end page served at /
STATIC_DIR = Path(os.getenv("STATIC_DIR", str(_ROOT / "web" / "static")))

# Local-time rendering for message timestamps (e.g. 2026/10/19 14:03:05)
MESSAGE_TIMESTAMP_FORMAT = os.getenv("MESSAGE_TIMESTAMP_FORMAT", "%Y/%m/%d %H:%M:%S")


def _parse_origins(value: str) -> list[str]:
    if not value:
        return ["*"]
    return [x.strip() for x in value.split(",") if x.strip()]


CORS_ORIGINS = _parse_origins(os.getenv("CORS_ORIGINS", "*"))

# Admin bootstrap. The default password is a permanent, publicly known credential
# until changed out-of-band; set INITIAL_ADMIN_PASSWORD in production.
INITIAL_ADMIN_USERNAME = os.getenv("INITIAL_ADMIN_USERNAME") or "admin"
DEFAULT_ADMIN_PASSWORD = "admin123"
INITIAL_ADMIN_PASSWORD = os.getenv("INITIAL_ADMIN_PASSWORD") or DEFAULT_ADMIN_PASSWORD

# Server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
