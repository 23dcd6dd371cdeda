"""Tests for the persistent store."""
import pytest
from sqlalchemy import text

from guestbook.errors import DuplicateKeyError, UnauthorizedError
from guestbook.models import make_engine
from guestbook.services import GuestbookStore, UserService


@pytest.mark.asyncio
async def test_insert_user_duplicate_raises(store):
    await store.insert_user("alice", "pw1")
    with pytest.raises(DuplicateKeyError):
        await store.insert_user("alice", "other")


@pytest.mark.asyncio
async def test_create_user_if_absent_is_noop_when_present(store):
    assert await store.create_user_if_absent("admin", "secret", is_admin=True) is True
    assert await store.create_user_if_absent("admin", "changed", is_admin=True) is False
    assert await store.find_user_by_credentials("admin", "secret") is not None
    assert await store.find_user_by_credentials("admin", "changed") is None


@pytest.mark.asyncio
async def test_password_is_not_stored_in_plaintext(store):
    await store.insert_user("alice", "pw1")
    user = await store.find_user_by_username("alice")
    assert user.password_hash != "pw1"
    assert not user.is_admin
    assert not user.is_banned


@pytest.mark.asyncio
async def test_find_user_by_credentials(store):
    await store.insert_user("alice", "pw1")
    assert (await store.find_user_by_credentials("alice", "pw1")).username == "alice"
    assert await store.find_user_by_credentials("alice", "wrong") is None
    assert await store.find_user_by_credentials("nobody", "pw1") is None


@pytest.mark.asyncio
async def test_list_messages_newest_first_ignoring_pins(store):
    first = await store.insert_message("a", "one", "t1")
    second = await store.insert_message("b", "two", "t2")
    await store.toggle_message_pin(first.id)
    rows = await store.list_messages()
    assert [m.id for m in rows] == [second.id, first.id]
    assert rows[1].is_pinned is True
    assert rows[0].is_pinned is False


@pytest.mark.asyncio
async def test_toggle_pin_twice_restores_and_missing_is_noop(store):
    m = await store.insert_message("a", "hi", "t")
    await store.toggle_message_pin(m.id)
    await store.toggle_message_pin(m.id)
    assert (await store.list_messages())[0].is_pinned is False
    await store.toggle_message_pin(9999)


@pytest.mark.asyncio
async def test_delete_messages_by_author(store):
    await store.insert_message("alice", "1", "t")
    await store.insert_message("bob", "2", "t")
    await store.insert_message("alice", "3", "t")
    assert await store.delete_messages_by_author("alice") == 2
    assert [m.author for m in await store.list_messages()] == ["bob"]


@pytest.mark.asyncio
async def test_list_non_admin_users_and_ban_flag(store):
    await store.create_user_if_absent("admin", "x", is_admin=True)
    await store.insert_user("alice", "pw")
    await store.insert_user("bob", "pw")
    await store.set_user_banned("bob", True)
    rows = await store.list_non_admin_users()
    assert [(u.username, u.is_banned) for u in rows] == [("alice", False), ("bob", True)]
    await store.delete_user("alice")
    assert [u.username for u in await store.list_non_admin_users()] == ["bob"]


@pytest.mark.asyncio
async def test_file_records(store):
    a = await store.insert_file_record("a.png", "/uploads/files-1-1.png", "2026-10-19T08:00:00.000Z")
    b = await store.insert_file_record("b.txt", "/uploads/files-1-2.txt", "2026-10-19T08:00:00.000Z")
    assert [f.id for f in await store.list_files()] == [b.id, a.id]
    assert a.comment is None
    assert await store.find_file_path(a.id) == "/uploads/files-1-1.png"
    await store.delete_file_record(a.id)
    assert await store.find_file_path(a.id) is None
    await store.delete_file_record(a.id)


@pytest.mark.asyncio
async def test_passwords_hashed_with_pbkdf2_and_empty_never_matches(store):
    await store.insert_user("alice", "pw1")
    user = await store.find_user_by_username("alice")
    assert user.password_hash.startswith("$pbkdf2-sha256$")
    assert await store.find_user_by_credentials("alice", "") is None


_LEGACY_SCHEMA = [
    """CREATE TABLE users (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        username TEXT UNIQUE NOT NULL,
        password TEXT NOT NULL,
        isAdmin BOOLEAN DEFAULT 0,
        isBanned BOOLEAN DEFAULT 0
    )""",
    """CREATE TABLE messages (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        author TEXT NOT NULL,
        content TEXT NOT NULL,
        timestamp TEXT NOT NULL,
        isPinned BOOLEAN DEFAULT 0
    )""",
    """CREATE TABLE files (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name TEXT NOT NULL,
        path TEXT NOT NULL,
        comment TEXT,
        uploadTime TEXT NOT NULL
    )""",
    "INSERT INTO users (username, password, isAdmin) VALUES ('admin', 'admin123', 1)",
    "INSERT INTO users (username, password) VALUES ('alice', 'pw1')",
    "INSERT INTO messages (author, content, timestamp) VALUES ('alice', 'hi', '2025/1/2 10:00:00')",
]


@pytest.mark.asyncio
async def test_database_from_earlier_server_keeps_working(database_url):
    """Plaintext passwords written by the old server still log in and get rehashed."""
    engine = make_engine(database_url)
    async with engine.begin() as conn:
        for sql in _LEGACY_SCHEMA:
            await conn.execute(text(sql))
    await engine.dispose()

    store = GuestbookStore(database_url)
    try:
        await store.init()
        users = UserService(store)
        assert await users.ensure_admin("admin", "admin123") is False

        admin = await users.login("admin", "admin123")
        assert admin.is_admin is True
        alice = await users.login("alice", "pw1")
        assert alice.is_banned is False
        with pytest.raises(UnauthorizedError):
            await users.login("alice", "wrong")

        stored = await store.find_user_by_username("alice")
        assert stored.password_hash.startswith("$pbkdf2-sha256$")
        assert (await users.login("alice", "pw1")).username == "alice"
        assert [(m.author, m.is_pinned) for m in await store.list_messages()] == [("alice", False)]
    finally:
        await store.close()
