from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Hashable, Mapping
    from datetime import datetime


@runtime_checkable
class ResourceOwnerProtocol(Protocol):
    id: Hashable


@runtime_checkable
class ClientProtocol(Protocol):
    id: Hashable
    client_id: str


@runtime_checkable
class AccessTokenProtocol(Protocol):
    id: Hashable
    token: str
    refresh_token: str | None
    resource_owner_id: Hashable
    application_id: Hashable | None
    scopes: str
    expires_in: int | None
    created_at: datetime
    revoked_at: datetime | None


@runtime_checkable
class TokenStoreProtocol(Protocol):
    async def find_by_token(self, token: str) -> AccessTokenProtocol | None: ...

    async def find_one_by_attributes(
        self,
        filters: Mapping[str, object],
        *,
        most_recent_first: bool = False,
    ) -> AccessTokenProtocol | None: ...

    async def find_all_by_owner_non_revoked(self, resource_owner_id: Hashable) -> list[AccessTokenProtocol]: ...

    async def insert(self, data: Mapping[str, object]) -> AccessTokenProtocol: ...

    async def revoke(
        self,
        token: AccessTokenProtocol,
        *,
        now: datetime | None = None,
    ) -> AccessTokenProtocol: ...


@runtime_checkable
class ClientResolverProtocol(Protocol):
    async def resolve_client(self, client_id: str) -> ClientProtocol | None: ...
