from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from belgie_tokens.alchemy.models import OAuthAccessToken, OAuthApplication
from belgie_tokens.exceptions import (
    ApplicationConstraintError,
    ConstraintError,
    ResourceOwnerConstraintError,
    TokenConstraintError,
)
from belgie_tokens.protocols import ClientResolverProtocol, TokenStoreProtocol

if TYPE_CHECKING:
    from collections.abc import Mapping
    from uuid import UUID

    from sqlalchemy.ext.asyncio import AsyncSession


class AlchemyTokenStore(TokenStoreProtocol):
    def __init__(
        self,
        session: AsyncSession,
        *,
        access_token: type[OAuthAccessToken] = OAuthAccessToken,
        application: type[OAuthApplication] = OAuthApplication,
    ) -> None:
        self.session = session
        self.access_token_model = access_token
        self.application_model = application

    async def find_by_token(self, token: str) -> OAuthAccessToken | None:
        stmt = select(self.access_token_model).where(self.access_token_model.token == token)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def find_one_by_attributes(
        self,
        filters: Mapping[str, object],
        *,
        most_recent_first: bool = False,
    ) -> OAuthAccessToken | None:
        stmt = select(self.access_token_model)
        for key, value in filters.items():
            column = getattr(self.access_token_model, key)
            stmt = stmt.where(column.is_(None) if value is None else column == value)
        if most_recent_first:
            stmt = stmt.order_by(
                self.access_token_model.created_at.desc(),
                self.access_token_model.seq.desc(),
            )
        result = await self.session.execute(stmt.limit(1))
        return result.scalars().first()

    async def find_all_by_owner_non_revoked(self, resource_owner_id: UUID) -> list[OAuthAccessToken]:
        stmt = select(self.access_token_model).where(
            self.access_token_model.resource_owner_id == resource_owner_id,
            self.access_token_model.revoked_at.is_(None),
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def insert(self, data: Mapping[str, object]) -> OAuthAccessToken:
        token = self.access_token_model(**data)
        self.session.add(token)
        try:
            await self.session.commit()
            await self.session.refresh(token)
        except IntegrityError as exc:
            await self.session.rollback()
            raise await self._constraint_error(exc, data) from exc
        except Exception:
            await self.session.rollback()
            raise
        return token

    async def revoke(self, token: OAuthAccessToken, *, now: datetime | None = None) -> OAuthAccessToken:
        token = await self.session.merge(token)
        if token.revoked_at is not None:
            return token
        token.revoked_at = now or datetime.now(UTC)
        try:
            await self.session.commit()
            await self.session.refresh(token)
        except Exception:
            await self.session.rollback()
            raise
        return token

    async def _constraint_error(self, exc: IntegrityError, data: Mapping[str, object]) -> ConstraintError:
        message = str(exc.orig).lower()
        if "refresh_token" in message:
            return TokenConstraintError("refresh_token")
        if "unique" in message or "duplicate" in message:
            return TokenConstraintError("token")
        if "application_id" in message:
            return ApplicationConstraintError()
        if "resource_owner_id" in message:
            return ResourceOwnerConstraintError()

        # SQLite does not name the foreign key that failed
        application_id = data.get("application_id")
        if application_id is not None and await self.session.get(self.application_model, application_id) is None:
            return ApplicationConstraintError()
        return ResourceOwnerConstraintError()


class AlchemyClientResolver(ClientResolverProtocol):
    def __init__(self, session: AsyncSession, *, application: type[OAuthApplication] = OAuthApplication) -> None:
        self.session = session
        self.application_model = application

    async def resolve_client(self, client_id: str) -> OAuthApplication | None:
        stmt = select(self.application_model).where(self.application_model.client_id == client_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
