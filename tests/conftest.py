from typing import Iterable

import httpx
import pytest
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel

from country_admin.database import get_session
from country_admin.main import app
from country_admin.models import Country


def make_session_maker(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def use_engine(engine):
    """Route the app's session dependency to `engine`."""
    session_maker = make_session_maker(engine)

    async def override_get_session():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session


@pytest.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'countries.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def client(engine):
    await use_engine(engine)
    async with httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
async def broken_client(tmp_path):
    """Client whose database has no country table, so every query fails."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'empty.db'}")
    await use_engine(engine)
    async with httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
    await engine.dispose()


@pytest.fixture
def add_countries(engine):
    async def add(names: Iterable[str]):
        async with make_session_maker(engine)() as session:
            session.add_all([Country(country=name) for name in names])
            await session.commit()

    return add
