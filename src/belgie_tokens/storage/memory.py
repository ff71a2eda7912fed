from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from belgie_tokens.exceptions import (
    ApplicationConstraintError,
    ResourceOwnerConstraintError,
    TokenConstraintError,
)
from belgie_tokens.protocols import ClientResolverProtocol, TokenStoreProtocol

if TYPE_CHECKING:
    from collections.abc import Hashable, Iterable, Mapping


def _utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass(slots=True, kw_only=True)
class MemoryApplication:
    id: UUID
    client_id: str
    name: str | None = None
    client_secret: str | None = None
    redirect_uri: str | None = None
    scopes: str | None = None
    created_at: datetime = field(default_factory=_utcnow)


@dataclass(slots=True, kw_only=True)
class MemoryAccessToken:
    id: UUID
    token: str
    resource_owner_id: Hashable
    scopes: str
    refresh_token: str | None = None
    application_id: UUID | None = None
    expires_in: int | None = None
    created_at: datetime = field(default_factory=_utcnow)
    revoked_at: datetime | None = None


class InMemoryOAuthStore(TokenStoreProtocol, ClientResolverProtocol):
    def __init__(self, *, resource_owner_ids: Iterable[Hashable] | None = None) -> None:
        self._applications: dict[UUID, MemoryApplication] = {}
        # Insertion ordered, which breaks created_at ties in favour of the later token
        self._access_tokens: dict[str, MemoryAccessToken] = {}
        self._refresh_tokens: dict[str, MemoryAccessToken] = {}
        self._resource_owner_ids = None if resource_owner_ids is None else set(resource_owner_ids)

    def add_resource_owner(self, resource_owner_id: Hashable) -> None:
        if self._resource_owner_ids is None:
            self._resource_owner_ids = set()
        self._resource_owner_ids.add(resource_owner_id)

    async def create_application(self, data: Mapping[str, object]) -> MemoryApplication:
        application = MemoryApplication(
            id=data.get("id", uuid4()),
            client_id=data["client_id"],
            name=data.get("name"),
            client_secret=data.get("client_secret"),
            redirect_uri=data.get("redirect_uri"),
            scopes=data.get("scopes"),
            created_at=data.get("created_at", _utcnow()),
        )
        self._applications[application.id] = application
        return application

    async def resolve_client(self, client_id: str) -> MemoryApplication | None:
        for application in self._applications.values():
            if application.client_id == client_id:
                return application
        return None

    async def find_by_token(self, token: str) -> MemoryAccessToken | None:
        return self._access_tokens.get(token)

    async def find_one_by_attributes(
        self,
        filters: Mapping[str, object],
        *,
        most_recent_first: bool = False,
    ) -> MemoryAccessToken | None:
        candidates = [
            token
            for token in self._access_tokens.values()
            if all(getattr(token, key) == value for key, value in filters.items())
        ]
        if not candidates:
            return None
        if most_recent_first:
            # max() keeps the first maximum, so scan newest first
            return max(reversed(candidates), key=lambda token: token.created_at)
        return candidates[0]

    async def find_all_by_owner_non_revoked(self, resource_owner_id: Hashable) -> list[MemoryAccessToken]:
        return [
            token
            for token in self._access_tokens.values()
            if token.resource_owner_id == resource_owner_id and token.revoked_at is None
        ]

    async def insert(self, data: Mapping[str, object]) -> MemoryAccessToken:
        token = MemoryAccessToken(
            id=data.get("id", uuid4()),
            token=data["token"],
            refresh_token=data.get("refresh_token"),
            resource_owner_id=data["resource_owner_id"],
            application_id=data.get("application_id"),
            scopes=data["scopes"],
            expires_in=data.get("expires_in"),
            created_at=data.get("created_at", _utcnow()),
            revoked_at=data.get("revoked_at"),
        )
        self._check_constraints(token)
        self._access_tokens[token.token] = token
        if token.refresh_token is not None:
            self._refresh_tokens[token.refresh_token] = token
        return token

    async def revoke(self, token: MemoryAccessToken, *, now: datetime | None = None) -> MemoryAccessToken:
        stored = self._access_tokens.get(token.token)
        if stored is None:
            msg = "access token is not stored"
            raise LookupError(msg)
        if stored.revoked_at is None:
            stored.revoked_at = now or _utcnow()
        return stored

    def _check_constraints(self, token: MemoryAccessToken) -> None:
        if token.token in self._access_tokens:
            raise TokenConstraintError("token")
        if token.refresh_token is not None and token.refresh_token in self._refresh_tokens:
            raise TokenConstraintError("refresh_token")
        if token.application_id is not None and token.application_id not in self._applications:
            raise ApplicationConstraintError
        if self._resource_owner_ids is not None and token.resource_owner_id not in self._resource_owner_ids:
            raise ResourceOwnerConstraintError
