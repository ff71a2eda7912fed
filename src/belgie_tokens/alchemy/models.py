from __future__ import annotations

from datetime import UTC, datetime
from uuid import UUID  # noqa: TC003

from sqlalchemy import ForeignKey, Integer, Text, literal_column
from sqlalchemy.orm import Mapped, mapped_column

from belgie_tokens.alchemy.base import Base, PrimaryKeyMixin
from belgie_tokens.alchemy.types import DateTimeUTC


def _utcnow() -> datetime:
    return datetime.now(UTC)


class OAuthApplication(Base, PrimaryKeyMixin):
    __tablename__ = "oauth_applications"

    client_id: Mapped[str] = mapped_column(Text, unique=True, index=True)

    name: Mapped[str | None] = mapped_column(Text, default=None)
    client_secret: Mapped[str | None] = mapped_column(Text, default=None)
    redirect_uri: Mapped[str | None] = mapped_column(Text, default=None)
    scopes: Mapped[str | None] = mapped_column(Text, default=None)

    created_at: Mapped[datetime] = mapped_column(DateTimeUTC, default_factory=_utcnow)


class OAuthAccessToken(Base, PrimaryKeyMixin):
    __tablename__ = "oauth_access_tokens"

    token: Mapped[str] = mapped_column(Text, unique=True, index=True)
    resource_owner_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="cascade", onupdate="cascade"),
        index=True,
    )
    scopes: Mapped[str] = mapped_column(Text)

    refresh_token: Mapped[str | None] = mapped_column(Text, unique=True, index=True, default=None)
    application_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("oauth_applications.id", ondelete="cascade", onupdate="cascade"),
        nullable=True,
        index=True,
        default=None,
    )
    expires_in: Mapped[int | None] = mapped_column(Integer, default=None)

    # Set client-side: sub-second precision orders tokens minted in the same second
    created_at: Mapped[datetime] = mapped_column(DateTimeUTC, default_factory=_utcnow, index=True)
    revoked_at: Mapped[datetime | None] = mapped_column(DateTimeUTC, default=None)

    # Insertion order, assigned by the database; breaks created_at ties
    seq: Mapped[int] = mapped_column(
        Integer,
        insert_default=literal_column("(SELECT COALESCE(MAX(seq), 0) + 1 FROM oauth_access_tokens)"),
        init=False,
        index=True,
    )
