"""Pytest configuration and fixtures for store, service and API tests."""
import os
import shutil
import tempfile

# Set test env BEFORE any imports that use config
_scratch = tempfile.mkdtemp(prefix="guestbook-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_scratch}/default.db"
os.environ["UPLOAD_DIR"] = os.path.join(_scratch, "uploads")
os.environ["INITIAL_ADMIN_USERNAME"] = "admin"
os.environ["INITIAL_ADMIN_PASSWORD"] = "testpass123"

import pytest
from httpx import ASGITransport, AsyncClient

from guestbook.services import BlobStore, FileService, GuestbookStore, MessageService, UserService
from web.api.main import bootstrap, create_app


def pytest_sessionfinish(session, exitstatus):
    shutil.rmtree(_scratch, ignore_errors=True)


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'guestbook.db'}"


@pytest.fixture
async def store(database_url):
    """Fresh store on a temporary SQLite file."""
    s = GuestbookStore(database_url)
    await s.init()
    yield s
    await s.close()


@pytest.fixture
def blobs(tmp_path):
    b = BlobStore(tmp_path / "uploads", "/uploads")
    b.ensure_dir()
    return b


@pytest.fixture
def users(store):
    return UserService(store)


@pytest.fixture
def messages(store):
    return MessageService(store)


@pytest.fixture
def files(store, blobs):
    return FileService(store, blobs)


@pytest.fixture
async def app(tmp_path, database_url):
    """App wired to temporary storage. Runs bootstrap by hand (ASGI lifespan doesn't run with httpx)."""
    application = create_app(
        database_url=database_url,
        upload_dir=tmp_path / "uploads",
        static_dir=tmp_path / "static",
    )
    await bootstrap(application)
    yield application
    await application.state.store.close()


@pytest.fixture
async def client(app):
    """Async HTTP client for testing the API."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
