"""Pytest fixtures for the SQLAlchemy token store."""

from __future__ import annotations

from importlib.util import find_spec
from tempfile import gettempdir
from typing import TYPE_CHECKING
from uuid import uuid4

import pytest

SQLALCHEMY_AVAILABLE = find_spec("sqlalchemy") is not None and find_spec("aiosqlite") is not None


def pytest_ignore_collect(collection_path, config) -> bool:  # noqa: ARG001
    return not SQLALCHEMY_AVAILABLE


if SQLALCHEMY_AVAILABLE:
    import pytest_asyncio

    from belgie_tokens.__tests__.fixtures import User, get_test_engine, get_test_session_factory
    from belgie_tokens.alchemy import AlchemyClientResolver, AlchemyTokenStore, OAuthApplication

    if TYPE_CHECKING:
        from collections.abc import AsyncGenerator

        from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

    @pytest.fixture
    def sqlite_database() -> str:
        return f"{gettempdir()}/belgie_tokens_test_{uuid4().hex}.db"

    @pytest_asyncio.fixture
    async def alchemy_engine(sqlite_database: str) -> AsyncGenerator[AsyncEngine, None]:
        engine = await get_test_engine(sqlite_database)
        yield engine
        await engine.dispose()

    @pytest_asyncio.fixture
    async def alchemy_session_factory(alchemy_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
        return await get_test_session_factory(alchemy_engine)

    @pytest_asyncio.fixture
    async def alchemy_session(
        alchemy_session_factory: async_sessionmaker[AsyncSession],
    ) -> AsyncGenerator[AsyncSession, None]:
        async with alchemy_session_factory() as session:
            yield session

    @pytest.fixture
    def token_store(alchemy_session: AsyncSession) -> AlchemyTokenStore:
        return AlchemyTokenStore(alchemy_session)

    @pytest.fixture
    def client_resolver(alchemy_session: AsyncSession) -> AlchemyClientResolver:
        return AlchemyClientResolver(alchemy_session)

    @pytest_asyncio.fixture
    async def user(alchemy_session: AsyncSession) -> User:
        user = User(email=f"{uuid4().hex}@example.com")
        alchemy_session.add(user)
        await alchemy_session.commit()
        await alchemy_session.refresh(user)
        return user

    @pytest_asyncio.fixture
    async def oauth_application(alchemy_session: AsyncSession) -> OAuthApplication:
        application = OAuthApplication(client_id="app-1", name="Test App")
        alchemy_session.add(application)
        await alchemy_session.commit()
        await alchemy_session.refresh(application)
        return application
