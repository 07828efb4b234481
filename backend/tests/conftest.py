"""
Shared fixtures.

The API runs against an in-memory SQLite database (one connection shared
through StaticPool) and a storage adapter whose network calls are replaced
by an in-memory object map.
"""

import os

os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DEBUG_ENDPOINTS_ENABLED", "true")
os.environ.setdefault("STORAGE_BUCKET", "uploads")
os.environ.setdefault("STORAGE_PUBLIC_BUCKET", "false")

from typing import Any, AsyncGenerator, Optional  # noqa: E402

import httpx  # noqa: E402
import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from buildlog.api.dependencies.database import get_db  # noqa: E402
from buildlog.api.dependencies.services import get_storage  # noqa: E402
from buildlog.api.main import create_application  # noqa: E402
from buildlog.shared.adapters.storage_adapter import StorageAdapter  # noqa: E402
from buildlog.shared.core.exceptions import ObjectExistsError, StorageError  # noqa: E402
from buildlog.shared.models import Base  # noqa: E402


class FakeStorage(StorageAdapter):
    """
    StorageAdapter with the S3 calls replaced by a dict.

    URL building (public_url / display_url) is the real implementation.
    """

    def __init__(self, public_bucket: bool = False) -> None:
        super().__init__(
            bucket="uploads",
            endpoint_url="https://storage.test",
            public_bucket=public_bucket,
        )
        self.objects: dict[str, bytes] = {}
        self.uploaded: list[str] = []
        self.removed: list[str] = []
        self.fail_removal = False
        self.fail_signing = False
        self.fail_listing = False
        # File names (after the key prefix) whose upload is refused
        self.refused_names: set[str] = set()

    def upload_object(self, path: str, data: bytes, content_type: str) -> str:
        if path in self.objects:
            raise ObjectExistsError(f"Object already exists: {path}")
        if path.split("_", 1)[-1] in self.refused_names:
            raise StorageError(f"Upload refused: {path}")
        self.objects[path] = data
        self.uploaded.append(path)
        return path

    def remove_objects(self, paths: list[str]) -> list[str]:
        if self.fail_removal:
            return list(paths)
        for path in paths:
            self.objects.pop(path, None)
            self.removed.append(path)
        return []

    def create_signed_url(self, path: str, expires_in: Optional[int] = None) -> str:
        if self.fail_signing:
            raise StorageError(f"Failed to sign URL for {path}")
        return f"https://storage.test/signed/{path}?expires={expires_in or 3600}"

    def list_objects(self, prefix: str, limit: int = 10) -> list[dict[str, Any]]:
        if self.fail_listing:
            raise StorageError(f"Failed to list {prefix}")
        names = sorted(path for path in self.objects if path.startswith(prefix))[:limit]
        return [
            {"name": name, "size": len(self.objects[name]), "last_modified": None}
            for name in names
        ]


@pytest.fixture
async def engine():
    test_engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest.fixture
def storage() -> FakeStorage:
    return FakeStorage()


@pytest.fixture
def app(session_factory, storage):
    application = create_application()

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    application.dependency_overrides[get_db] = override_get_db
    application.dependency_overrides[get_storage] = lambda: storage
    return application


@pytest.fixture
async def client(app) -> AsyncGenerator[httpx.AsyncClient, None]:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as test_client:
        yield test_client


async def register(client: httpx.AsyncClient, email: str, password: str = "password123") -> dict:
    response = await client.post("/auth/register", json={"email": email, "password": password})
    assert response.status_code == 201, response.text
    body = response.json()
    return {
        "user_id": body["user"]["id"],
        "headers": {"Authorization": f"Bearer {body['access_token']}"},
    }


@pytest.fixture
async def user(client) -> dict:
    return await register(client, "builder@example.com")


@pytest.fixture
def auth_headers(user) -> dict:
    return user["headers"]


@pytest.fixture
async def other_user(client) -> dict:
    return await register(client, "someone.else@example.com")


async def create_project(client: httpx.AsyncClient, headers: dict, **fields) -> dict:
    payload = {"name": "Widget", **fields}
    response = await client.post("/projects", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()
