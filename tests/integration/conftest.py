from uuid import uuid4

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.utils.jwt import create_access_token
from src.depends import get_unit_of_work


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def app(session_factory):
    from config import ApplicationConfig
    from src.api.app import create_app

    app = create_app(ApplicationConfig)

    # A fresh session per request, as in production
    async def override_get_unit_of_work():
        async with session_factory() as session:
            yield SqlAlchemyUnitOfWork(session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    return app


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


class Identity:
    """A caller as the identity provider would describe them"""

    def __init__(self, email: str):
        self.user_id = uuid4()
        self.email = email
        self.headers = {
            "Authorization": f"Bearer {create_access_token(self.user_id, email)}"
        }


@pytest.fixture
def alice():
    return Identity("alice@example.com")


@pytest.fixture
def bob():
    return Identity("bob@example.com")


@pytest.fixture
def carol():
    return Identity("carol@example.com")


@pytest.fixture
def dave():
    return Identity("dave@example.com")


@pytest_asyncio.fixture
async def business_id(client, alice):
    """A business owned by alice"""
    response = await client.post(
        "/businesses", json={"name": "Acme Bakery"}, headers=alice.headers
    )
    assert response.status_code == 201
    return response.json()["id"]
