"""
Pytest configuration for backend tests.

Every test gets a fresh app bound to its own SQLite file, so tests never
share state. AnyIO runs on the asyncio backend only.
"""
import httpx
import pytest
from httpx import ASGITransport

from school_admin import create_app
from school_admin.core.config import Settings
from school_admin.core.database import close_db, init_db

TEST_SECRET = "test-secret-key-for-school-admin"

TEACHER = {
    "name": "A",
    "email": "a@x.com",
    "password": "password1",
    "address": "1 Main Street",
}


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def settings(tmp_path):
    return Settings(
        SECRET_KEY=TEST_SECRET,
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        BCRYPT_ROUNDS=4,
        LOG_LEVEL="WARNING",
        _env_file=None,
    )


@pytest.fixture
async def app(settings):
    application = create_app(settings)
    await init_db(application.state.engine)
    yield application
    await close_db(application.state.engine)


@pytest.fixture
async def client(app):
    async with httpx.AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c


@pytest.fixture
def register_teacher(client):
    async def _register(**overrides):
        payload = dict(TEACHER)
        payload.update(overrides)
        return await client.post("/register", json=payload)
    return _register


@pytest.fixture
def login(client):
    async def _login(email=TEACHER["email"], password=TEACHER["password"]):
        return await client.post("/login", json={"email": email, "password": password})
    return _login


@pytest.fixture
async def teacher_session(register_teacher, login):
    """Registered teacher plus ready-to-use auth headers."""
    await register_teacher()
    r = await login()
    body = r.json()
    return {
        "teacher": body["user"],
        "token": body["token"],
        "headers": {"Authorization": f"Bearer {body['token']}"},
    }


@pytest.fixture
def auth_headers(teacher_session):
    return teacher_session["headers"]
