"""FastAPI guestbook API - serves the JSON API, uploaded files and the front-end page."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

import config
from guestbook.errors import GuestbookError
from guestbook.services import BlobStore, FileService, GuestbookStore, MessageService, UserService

from web.api.auth_routes import router as auth_router
from web.api.file_routes import router as file_router
from web.api.message_routes import router as message_router
from web.api.user_routes import router as user_router

logger = logging.getLogger("guestbook.api")


async def bootstrap(app: FastAPI) -> None:
    """Create the upload directory and tables, then seed the admin account."""
    app.state.blobs.ensure_dir()
    await app.state.store.init()
    await app.state.user_service.ensure_admin(
        config.INITIAL_ADMIN_USERNAME,
        config.INITIAL_ADMIN_PASSWORD,
        default_password=config.DEFAULT_ADMIN_PASSWORD,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    await bootstrap(app)
    logger.info(
        "Guestbook API ready (database %s, uploads in %s)",
        app.state.store.database_url,
        app.state.blobs.upload_dir,
    )
    yield
    await app.state.store.close()


async def _guestbook_error_handler(request: Request, exc: GuestbookError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": "Invalid request"})


def create_app(
    database_url: Optional[str] = None,
    upload_dir: Optional[Path] = None,
    static_dir: Optional[Path] = None,
) -> FastAPI:
    """Build the app and its store/service singletons. Arguments override config."""
    app = FastAPI(title="Guestbook API", lifespan=lifespan)

    store = GuestbookStore(database_url or config.DATABASE_URL)
    blobs = BlobStore(upload_dir or config.UPLOAD_DIR, config.UPLOAD_URL_PREFIX)
    app.state.store = store
    app.state.blobs = blobs
    app.state.user_service = UserService(store)
    app.state.message_service = MessageService(store, config.MESSAGE_TIMESTAMP_FORMAT)
    app.state.file_service = FileService(store, blobs)

    app.add_exception_handler(GuestbookError, _guestbook_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(auth_router)
    app.include_router(message_router)
    app.include_router(file_router)
    app.include_router(user_router)

    @app.get("/api/health")
    async def health():
        return {"status": "ok"}

    # Mounts go last so API routes match first
    app.mount(blobs.url_prefix, StaticFiles(directory=blobs.upload_dir, check_dir=False), name="uploads")
    static_dir = Path(static_dir or config.STATIC_DIR)
    if static_dir.exists():
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")

    return app


app = create_app()
