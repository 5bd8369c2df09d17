import os
import uuid

TEST_DB_URL = "sqlite://:memory:?cache=shared"
os.environ["DATABASE_URL"] = TEST_DB_URL
os.environ["ENV"] = "test"
os.environ["SESSION_SECRET"] = "test-session-secret"
os.environ.pop("ADMIN_PASSWORD", None)

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from tortoise import Tortoise

from brightpath.config import settings
from brightpath.core import db as db_module
from brightpath.core.security import hash_password
from brightpath.main import app, create_app
from brightpath.models.user import User

db_module.DB_URL = TEST_DB_URL
db_module.TORTOISE_ORM["connections"]["default"] = TEST_DB_URL


async def _init_test_db() -> None:
    """
    Initialize a clean in-memory SQLite database for every test.
    Ensures tables are recreated from scratch.
    """
    if Tortoise._inited:
        await Tortoise.close_connections()
    await Tortoise.init(config=db_module.TORTOISE_ORM)
    await Tortoise.generate_schemas()


@pytest_asyncio.fixture
async def db():
    """
    Fresh database without an HTTP client, for service-level tests.
    """
    await _init_test_db()
    yield
    await Tortoise.close_connections()


@pytest_asyncio.fixture
async def client(db):
    """
    Provide an HTTPX AsyncClient bound to the FastAPI app with a fresh DB.
    Cookies set by the app persist across requests, like a browser.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        yield async_client


@pytest_asyncio.fixture
async def client_factory(db):
    """
    Build clients for apps created with settings overrides, e.g.
    ``await client_factory(enable_journal=False)``.
    """
    clients = []

    async def _make(**overrides) -> AsyncClient:
        custom = create_app(settings.model_copy(update=overrides))
        c = AsyncClient(transport=ASGITransport(app=custom), base_url="http://testserver")
        clients.append(c)
        return c

    yield _make
    for c in clients:
        await c.aclose()


@pytest_asyncio.fixture
async def create_admin():
    """
    Factory fixture to create admin users directly via ORM; signup never grants admin.
    """

    async def _create_admin(password: str = "AdminPass!23") -> tuple[User, str]:
        user = await User.create(
            email=f"admin_{uuid.uuid4().hex[:6]}@example.com",
            password_hash=hash_password(password),
            role="admin",
        )
        return user, password

    return _create_admin


@pytest_asyncio.fixture
async def create_user():
    """
    Factory fixture to create regular users directly.
    """

    async def _create_user(password: str = "UserPass!23", role: str = "user") -> tuple[User, str]:
        user = await User.create(
            email=f"user_{uuid.uuid4().hex[:6]}@example.com",
            password_hash=hash_password(password),
            role=role,
        )
        return user, password

    return _create_user


@pytest_asyncio.fixture
async def login_as(client):
    """
    Log the shared client in; the session cookie is kept by the client.
    """

    async def _login(email: str, password: str):
        resp = await client.post("/login", data={"email": email, "password": password})
        assert resp.status_code == 303, resp.text
        return resp

    return _login
