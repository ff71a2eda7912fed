from __future__ import annotations

from types import SimpleNamespace
from uuid import uuid4

import pytest
import pytest_asyncio

from belgie_tokens.authority import AccessTokenAuthority
from belgie_tokens.settings import TokenSettings
from belgie_tokens.storage.memory import InMemoryOAuthStore, MemoryApplication


@pytest.fixture
def token_settings() -> TokenSettings:
    return TokenSettings(default_scopes=["public"])


@pytest.fixture
def memory_store() -> InMemoryOAuthStore:
    return InMemoryOAuthStore()


@pytest.fixture
def resource_owner() -> SimpleNamespace:
    return SimpleNamespace(id=uuid4())


@pytest_asyncio.fixture
async def application(memory_store: InMemoryOAuthStore) -> MemoryApplication:
    return await memory_store.create_application({"client_id": "app-1", "name": "Test App"})


@pytest.fixture
def authority(memory_store: InMemoryOAuthStore, token_settings: TokenSettings) -> AccessTokenAuthority:
    return AccessTokenAuthority(store=memory_store, clients=memory_store, settings=token_settings)
